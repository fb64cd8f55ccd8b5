"""
Core Code Complexity Analyzer.

Runs the structural detector, then the heuristic optimizer, and merges
their suggestions into one deduplicated, priority-ordered list.
"""

import logging
from typing import Optional

from .config import PRIORITY_RANK
from .detector import StructuralDetector
from .languages import DEFAULT_LANGUAGE, detect_language, resolve_profile
from .models import AnalysisResult, Suggestion
from .optimizer import HeuristicOptimizer

logger = logging.getLogger(__name__)

AUTO_LANGUAGE = "auto"


def merge_suggestions(*groups: list[Suggestion]) -> list[Suggestion]:
    """
    Concatenate suggestion groups, drop repeats and order by priority.

    The first suggestion seen for a (line, title) key wins. The sort is
    stable, so equal priorities keep their merged order.
    """
    seen: set[tuple[int, str]] = set()
    unique = []
    for group in groups:
        for suggestion in group:
            if suggestion.key in seen:
                continue
            seen.add(suggestion.key)
            unique.append(suggestion)

    return sorted(unique, key=lambda s: PRIORITY_RANK[s.priority], reverse=True)


def analyze(code: str, language: str = DEFAULT_LANGUAGE) -> AnalysisResult:
    """
    Analyze code complexity.

    Args:
        code: Source code string to analyze, possibly empty
        language: Language tag; unknown tags use the C-family heuristics

    Returns:
        AnalysisResult with per-line labels, patterns, suggestions and
        educational content
    """
    profile = resolve_profile(language)

    detector_result = StructuralDetector(code, profile.id).analyze()
    optimizer = HeuristicOptimizer(code, profile.id, detector_result)
    suggestions = merge_suggestions(detector_result.suggestions, optimizer.generate_suggestions())

    return AnalysisResult(
        language=profile.id,
        overall=detector_result.overall,
        line_by_line=detector_result.line_by_line,
        patterns=detector_result.patterns,
        suggestions=suggestions,
        educational=detector_result.educational,
    )


class CodeComplexityAnalyzer:
    """
    Code complexity analyzer.

    Takes code as input, returns complexity analysis. Resolves the `auto`
    language tag through language detection before analyzing.
    """

    def __init__(self, default_language: str = AUTO_LANGUAGE):
        self.default_language = default_language

    def detect(self, code: str, language: Optional[str] = None, filename: Optional[str] = None) -> str:
        """Resolve the language tag to use for a snippet."""
        tag = (language or self.default_language).strip().lower()
        if tag == AUTO_LANGUAGE:
            return detect_language(code, filename)
        return resolve_profile(tag).id

    def analyze(self, code: str, language: Optional[str] = None, filename: Optional[str] = None) -> AnalysisResult:
        language_id = self.detect(code, language, filename)
        result = analyze(code, language_id)

        logger.info(
            f"Analyzed {len(result.line_by_line)} lines as {language_id}: "
            f"time={result.overall.time}, score={result.overall.score}, "
            f"suggestions={len(result.suggestions)}"
        )
        return result
