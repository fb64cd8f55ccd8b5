"""
Shared text-pattern recognizers.

Line predicates and the loop-region block scanner used by both the
structural detector and the heuristic optimizer. Everything here works on
raw text; nothing is parsed.
"""

import re
from dataclasses import dataclass
from typing import Sequence

from .languages import LanguageProfile


# A call whose arguments contain `identifier +/- number`, e.g. f(n-1)
RECURSIVE_CALL_PATTERN = re.compile(r"\w+\s*\([^)]*\w+\s*[-+]\s*\d+[^)]*\)")

COLLECTION_PATTERNS = [
    re.compile(r"\.find\("),
    re.compile(r"\.filter\("),
    re.compile(r"\.map\("),
    re.compile(r"\.forEach\("),
    re.compile(r"in\s+\w+"),
    re.compile(r"\.contains\("),
    re.compile(r"\.indexOf\("),
]

HASH_PATTERNS = [
    re.compile(r"\[.*\]\s*="),
    re.compile(r"\.get\("),
    re.compile(r"\.put\("),
    re.compile(r"\[.*\]"),
]

FUNCTION_NAME_PATTERN = re.compile(r"(?:def|function)\s+(\w+)|(\w+)\s*\(")

PLACEHOLDER_FUNCTION_NAME = "function"


def is_recursive_call(line: str) -> bool:
    """
    Check whether a line looks like a recursive self-call.

    Any `def` header or call with an arithmetic argument counts, whether or
    not the call actually refers to the enclosing function.
    """
    return "def " in line or RECURSIVE_CALL_PATTERN.search(line) is not None


def is_collection_operation(line: str) -> bool:
    return any(pattern.search(line) for pattern in COLLECTION_PATTERNS)


def is_hash_operation(line: str) -> bool:
    return any(pattern.search(line) for pattern in HASH_PATTERNS)


def looks_like_function(line: str) -> bool:
    """Check whether a line looks like a function definition."""
    return (
        "def " in line
        or "function " in line
        or ("(" in line and ")" in line and "{" in line)
    )


def extract_function_name(line: str) -> str:
    """Best-effort function name extraction, falling back to a placeholder."""
    match = FUNCTION_NAME_PATTERN.search(line)
    if not match:
        return PLACEHOLDER_FUNCTION_NAME
    return match.group(1) or match.group(2) or PLACEHOLDER_FUNCTION_NAME


def lines_from(lines: Sequence[str], start: int, size: int) -> list[str]:
    """Lines [start, start + size), clipped to the input."""
    return list(lines[start:min(start + size, len(lines))])


def lines_around(lines: Sequence[str], index: int, before: int, after: int) -> list[str]:
    """Lines [index - before, index + after), clipped to the input."""
    return list(lines[max(0, index - before):min(len(lines), index + after)])


@dataclass(frozen=True)
class LoopRegion:
    """
    Result of scanning the block opened at `start`.

    `start` and `end` are 0-based and inclusive. `max_depth` counts loop
    headers that were open at the same time, the starting line included
    when it is a loop. `inner_loops` counts loop headers found inside the
    block after the starting line.
    """

    start: int
    end: int
    max_depth: int
    inner_loops: int

    @property
    def is_nested(self) -> bool:
        return self.max_depth > 1


def _indent_of(line: str) -> int:
    expanded = line.expandtabs(4)
    return len(expanded) - len(expanded.lstrip())


def _scan_braces(lines: Sequence[str], start: int, profile: LanguageProfile, limit: int) -> LoopRegion:
    depth = 0
    max_depth = 0
    braces = 0
    inner_loops = 0
    end = start

    for index in range(start, limit):
        line = lines[index].strip()
        end = index
        is_loop = profile.is_loop(line)
        closes = line.count("}")

        if is_loop:
            depth += 1
            max_depth = max(max_depth, depth)

        braces += line.count("{") - closes
        depth = max(0, depth - closes)

        if is_loop and index > start and braces > 0:
            inner_loops += 1

        if braces == 0 and index > start:
            break

    return LoopRegion(start=start, end=end, max_depth=max_depth, inner_loops=inner_loops)


def _scan_indent(lines: Sequence[str], start: int, profile: LanguageProfile, limit: int) -> LoopRegion:
    header_indent = _indent_of(lines[start])
    # Indentation of each loop header enclosing the current line
    open_loops = [header_indent] if profile.is_loop(lines[start].strip()) else []
    max_depth = len(open_loops)
    inner_loops = 0
    end = start

    for index in range(start + 1, limit):
        raw = lines[index]
        if not raw.strip():
            continue
        indent = _indent_of(raw)
        if indent <= header_indent:
            break
        end = index

        while open_loops and open_loops[-1] >= indent:
            open_loops.pop()

        if profile.is_loop(raw.strip()):
            open_loops.append(indent)
            inner_loops += 1
            max_depth = max(max_depth, len(open_loops))

    return LoopRegion(start=start, end=end, max_depth=max_depth, inner_loops=inner_loops)


def scan_block(
    lines: Sequence[str],
    start: int,
    profile: LanguageProfile,
    window: int,
) -> LoopRegion:
    """
    Scan the block opened at `start`, looking at no more than `window` lines.

    Brace languages track `{`/`}` tokens and stop once the brace depth is back
    to zero after the starting line. Indentation languages stop at the first
    non-blank line indented no deeper than the starting line.
    """
    limit = min(start + window, len(lines))
    if profile.block_style == "indent":
        return _scan_indent(lines, start, profile, limit)
    return _scan_braces(lines, start, profile, limit)
