"""
Supported languages and per-language recognizer profiles.

The catalog is shared by language detection and by the loop-header
recognizer, so both agree on which languages exist.
"""

import logging
import re
from dataclasses import dataclass
from typing import Literal, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageProfile:
    """Language metadata plus the recognizer settings used by the engine."""

    id: str
    name: str
    extensions: tuple[str, ...]
    keywords: tuple[str, ...]
    loop_pattern: re.Pattern
    block_style: Literal["braces", "indent"]

    def is_loop(self, line: str) -> bool:
        """Check whether a line opens a loop."""
        return self.loop_pattern.search(line) is not None


_C_FAMILY_LOOP = re.compile(r"\b(for|while)\s*\(")

SUPPORTED_LANGUAGES: tuple[LanguageProfile, ...] = (
    LanguageProfile(
        id="cpp",
        name="C++",
        extensions=(".cpp", ".cc", ".cxx", ".h", ".hpp"),
        keywords=("#include", "using namespace", "int main", "std::", "cout", "cin", "vector", "class"),
        loop_pattern=_C_FAMILY_LOOP,
        block_style="braces",
    ),
    LanguageProfile(
        id="java",
        name="Java",
        extensions=(".java",),
        keywords=("public class", "private", "public", "static", "void", "import", "package", "System.out"),
        loop_pattern=_C_FAMILY_LOOP,
        block_style="braces",
    ),
    LanguageProfile(
        id="python",
        name="Python",
        extensions=(".py",),
        keywords=("def ", "import ", "from ", "class ", "if __name__", "print(", "range(", "len("),
        loop_pattern=re.compile(r"\b(for|while)\b.*:"),
        block_style="indent",
    ),
)

DEFAULT_LANGUAGE = "cpp"

_PROFILES = {profile.id: profile for profile in SUPPORTED_LANGUAGES}


def get_language_info(language_id: str) -> Optional[LanguageProfile]:
    """Return the catalog entry for an id, or None."""
    return _PROFILES.get(language_id)


def resolve_profile(language: Optional[str]) -> LanguageProfile:
    """
    Resolve a language tag to its profile.

    Unknown or empty tags fall back to the C-family profile.
    """
    tag = (language or "").strip().lower()
    profile = _PROFILES.get(tag)
    if profile is None:
        logger.debug(f"Unknown language tag {language!r}, using {DEFAULT_LANGUAGE}")
        return _PROFILES[DEFAULT_LANGUAGE]
    return profile


def detect_language(code: str, filename: Optional[str] = None) -> str:
    """
    Guess the language of a snippet.

    Args:
        code: Source code text
        filename: Optional filename; a known extension wins outright

    Returns:
        Language id from SUPPORTED_LANGUAGES, DEFAULT_LANGUAGE when nothing matches
    """
    if filename and "." in filename:
        extension = "." + filename.rsplit(".", 1)[-1].lower()
        for profile in SUPPORTED_LANGUAGES:
            if extension in profile.extensions:
                return profile.id

    scores = {}
    for profile in SUPPORTED_LANGUAGES:
        scores[profile.id] = sum(
            len(re.findall(re.escape(keyword), code, re.IGNORECASE))
            for keyword in profile.keywords
        )

    # Ties go to the later catalog entry
    best = SUPPORTED_LANGUAGES[0].id
    for language_id in scores:
        if not scores[best] > scores[language_id]:
            best = language_id

    logger.debug(f"Language scores: {scores}")
    return best if scores[best] > 0 else DEFAULT_LANGUAGE
