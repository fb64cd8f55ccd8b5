"""
Heuristic optimizer.

Re-scans the source with shape-specific recognizers (search in loops,
fibonacci-style recursion, sort idioms, string building, data structure
misuse, memory use) and emits targeted suggestions with example rewrites.
Each recognizer family is an independent forward scan; one line may
trigger several families.
"""

import logging
from typing import Optional

from .config import (
    BUBBLE_SORT_WINDOW,
    FIBONACCI_WINDOW,
    LOOKUP_THRESHOLD,
    LOOKUP_WINDOW,
    LOOP_CONTEXT_WINDOW,
    NESTED_LOOP_WINDOW,
    SELECTION_SORT_WINDOW,
    SORTED_HINT_WINDOW,
    SPACE_WINDOW,
    STRING_CONCAT_WINDOW,
    TAIL_RECURSION_WINDOW,
)
from .languages import DEFAULT_LANGUAGE, resolve_profile
from .models import DetectorResult, Suggestion
from .recognizers import (
    extract_function_name,
    lines_around,
    lines_from,
    looks_like_function,
    scan_block,
)
from .templates import EXAMPLES, build_memoization_example, build_tail_recursion_example

logger = logging.getLogger(__name__)


class HeuristicOptimizer:
    """
    Suggestion generator driven by textual shape recognizers.

    The detector's preliminary result is accepted for interface symmetry;
    matching uses only the raw text and the language profile.
    """

    def __init__(self, code: str, language: str = DEFAULT_LANGUAGE, analysis: Optional[DetectorResult] = None):
        self.code = code
        self.profile = resolve_profile(language)
        self.analysis = analysis
        self.lines = code.split("\n")

    def generate_suggestions(self) -> list[Suggestion]:
        suggestions: list[Suggestion] = []

        suggestions.extend(self.analyze_nested_loops())
        suggestions.extend(self.analyze_recursion_patterns())
        suggestions.extend(self.analyze_data_structure_usage())
        suggestions.extend(self.analyze_search_patterns())
        suggestions.extend(self.analyze_sorting_patterns())
        suggestions.extend(self.analyze_string_operations())
        suggestions.extend(self.analyze_memory_optimizations())

        logger.debug(f"Optimizer [{self.profile.id}]: {len(suggestions)} suggestions")
        return suggestions

    # ------------------------------------------------------------------
    # Recognizer families
    # ------------------------------------------------------------------

    def analyze_nested_loops(self) -> list[Suggestion]:
        suggestions = []

        for index, raw in enumerate(self.lines):
            if not (self._is_loop(raw) and self._has_nested_loop(index)):
                continue

            context = [line.lower() for line in lines_from(self.lines, index, LOOP_CONTEXT_WINDOW)]

            if any("==" in line or "find" in line or "search" in line for line in context):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="optimization",
                    title="Replace nested loop search with hash map",
                    description="Convert O(n²) nested loop search to O(n) using a hash map for constant-time lookups.",
                    example=EXAMPLES["hash_map"],
                    priority="high",
                ))

            if any("[i][j]" in line or "matrix" in line or "grid" in line for line in context):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="algorithm",
                    title="Optimize matrix operations",
                    description="Consider cache-friendly iteration patterns or specialized matrix algorithms.",
                    example=EXAMPLES["matrix"],
                    priority="medium",
                ))

        return suggestions

    def analyze_recursion_patterns(self) -> list[Suggestion]:
        suggestions = []

        for index, raw in enumerate(self.lines):
            line = raw.strip()
            if not looks_like_function(line):
                continue

            function_name = extract_function_name(line)

            if self._is_fibonacci_pattern(index):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="algorithm",
                    title="Implement memoization for recursive function",
                    description="Add memoization to avoid redundant calculations and reduce time complexity from O(2^n) to O(n).",
                    example=build_memoization_example(function_name),
                    priority="high",
                ))

            if self._can_optimize_to_tail_recursion(index):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="optimization",
                    title="Convert to tail recursion or iterative approach",
                    description="Optimize stack usage by converting to tail recursion or an iterative solution.",
                    example=build_tail_recursion_example(function_name),
                    priority="medium",
                ))

        return suggestions

    def analyze_data_structure_usage(self) -> list[Suggestion]:
        suggestions = []

        for index, raw in enumerate(self.lines):
            line = raw.strip()

            if ".insert(0" in line or ".unshift(" in line or "insert(arr.begin()" in line:
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="optimization",
                    title="Use deque for efficient front insertions",
                    description="Array insertions at the beginning are O(n). Consider using a deque or linked list for O(1) front insertions.",
                    example=EXAMPLES["deque"],
                    priority="medium",
                ))

            if self._has_frequent_array_lookups(index):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="optimization",
                    title="Replace array with hash map for faster lookups",
                    description="Convert O(n) array searches to O(1) hash map lookups for better performance.",
                    example=EXAMPLES["hash_map_lookup"],
                    priority="high",
                ))

            if ("unique" in line or "distinct" in line) and (
                "array" in line or "list" in line or "vector" in line
            ):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="optimization",
                    title="Use Set data structure for unique elements",
                    description="Set operations on arrays are inefficient. Use a Set data structure for O(1) add/remove/contains operations.",
                    example=EXAMPLES["set"],
                    priority="medium",
                ))

        return suggestions

    def analyze_search_patterns(self) -> list[Suggestion]:
        suggestions = []

        for index, raw in enumerate(self.lines):
            line = raw.strip()

            if self._is_linear_search_in_sorted_array(index):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="algorithm",
                    title="Use binary search for sorted arrays",
                    description="Replace O(n) linear search with O(log n) binary search for sorted data.",
                    example=EXAMPLES["binary_search"],
                    priority="high",
                ))

            if ".find(" in line or ".indexOf(" in line or "substring" in line or "strstr" in line:
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="algorithm",
                    title="Consider KMP algorithm for string matching",
                    description="For repeated string searches, KMP algorithm provides O(n+m) complexity instead of O(n*m).",
                    example=EXAMPLES["kmp"],
                    priority="medium",
                ))

        return suggestions

    def analyze_sorting_patterns(self) -> list[Suggestion]:
        suggestions = []

        for index in range(len(self.lines)):
            if self._is_bubble_sort(index):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="algorithm",
                    title="Replace bubble sort with efficient sorting algorithm",
                    description="Bubble sort has O(n²) complexity. Use quicksort, mergesort, or built-in sort functions for O(n log n) performance.",
                    example=EXAMPLES["efficient_sort"],
                    priority="high",
                ))

            if self._is_selection_sort(index):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="algorithm",
                    title="Upgrade from selection sort to merge sort",
                    description="Selection sort is O(n²). Consider merge sort or heap sort for guaranteed O(n log n) performance.",
                    example=EXAMPLES["merge_sort"],
                    priority="high",
                ))

        return suggestions

    def analyze_string_operations(self) -> list[Suggestion]:
        suggestions = []

        for index, raw in enumerate(self.lines):
            line = raw.strip()

            if self._has_string_concatenation_in_loop(index):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="optimization",
                    title="Use StringBuilder for string concatenation in loops",
                    description="String concatenation in loops creates O(n²) complexity. Use StringBuilder or string arrays for O(n) performance.",
                    example=EXAMPLES["string_builder"],
                    priority="high",
                ))

            if "charAt" in line or ("[i]" in line and "string" in line):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="optimization",
                    title="Optimize character-by-character string operations",
                    description="Consider using character arrays or StringBuilder for efficient string manipulation.",
                    example=EXAMPLES["char_array"],
                    priority="medium",
                ))

        return suggestions

    def analyze_memory_optimizations(self) -> list[Suggestion]:
        suggestions = []

        for index, raw in enumerate(self.lines):
            line = raw.strip()

            if ".copy()" in line or ".clone()" in line or "Arrays.copyOf" in line or "memcpy" in line:
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="optimization",
                    title="Avoid unnecessary array copying",
                    description="Array copying is O(n) operation. Consider using array slicing or in-place operations when possible.",
                    example=EXAMPLES["in_place"],
                    priority="medium",
                ))

            if self._has_space_inefficiency(index):
                suggestions.append(Suggestion(
                    line=index + 1,
                    kind="optimization",
                    title="Optimize space complexity",
                    description="Consider space-time trade-offs. Sometimes using O(1) extra space instead of O(n) can be beneficial.",
                    example=EXAMPLES["space_optimization"],
                    priority="low",
                ))

        return suggestions

    # ------------------------------------------------------------------
    # Windowed predicates
    # ------------------------------------------------------------------

    def _is_loop(self, line: str) -> bool:
        return self.profile.is_loop(line.strip())

    def _has_nested_loop(self, index: int) -> bool:
        """Check for a loop header inside the block opened at `index`."""
        return scan_block(self.lines, index, self.profile, NESTED_LOOP_WINDOW).inner_loops > 0

    def _is_fibonacci_pattern(self, index: int) -> bool:
        body = " ".join(lines_from(self.lines, index, FIBONACCI_WINDOW))
        return "fibonacci" in body or ("n-1" in body and "n-2" in body)

    def _can_optimize_to_tail_recursion(self, index: int) -> bool:
        # A returned call that is not combined with + or *
        return any(
            "return" in line and "(" in line and "+" not in line and "*" not in line
            for line in lines_from(self.lines, index, TAIL_RECURSION_WINDOW)
        )

    def _has_frequent_array_lookups(self, index: int) -> bool:
        before, after = LOOKUP_WINDOW
        lookups = sum(
            1 for line in lines_around(self.lines, index, before, after)
            if ".find(" in line or ".indexOf(" in line or "in " in line
        )
        return lookups >= LOOKUP_THRESHOLD

    def _is_linear_search_in_sorted_array(self, index: int) -> bool:
        line = self.lines[index]
        if not ("==" in line and self._is_loop(line)):
            return False
        before, after = SORTED_HINT_WINDOW
        return any(
            "sorted" in nearby.lower() or "ascending" in nearby.lower()
            for nearby in lines_around(self.lines, index, before, after)
        )

    def _is_bubble_sort(self, index: int) -> bool:
        context = " ".join(lines_from(self.lines, index, BUBBLE_SORT_WINDOW))
        if "bubble" in context:
            return True
        return "swap" in context and "j+1" in context and self._has_nested_loop(index)

    def _is_selection_sort(self, index: int) -> bool:
        context = " ".join(lines_from(self.lines, index, SELECTION_SORT_WINDOW))
        if "selection" in context:
            return True
        return "min" in context and "swap" in context and self._has_nested_loop(index)

    def _has_string_concatenation_in_loop(self, index: int) -> bool:
        if not self._is_loop(self.lines[index]):
            return False
        return any(
            "+=" in line and ('"' in line or "'" in line)
            for line in lines_from(self.lines, index, STRING_CONCAT_WINDOW)
        )

    def _has_space_inefficiency(self, index: int) -> bool:
        return any(
            "new " in line and ("[n]" in line or "vector<" in line)
            for line in lines_from(self.lines, index, SPACE_WINDOW)
        )
