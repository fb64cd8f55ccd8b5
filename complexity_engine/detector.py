"""
Structural complexity detector.

Single pass over the source lines that finds loop regions, nested loops and
recursive calls, labels every line with a Big-O contribution, and folds the
detected patterns into an overall score.
"""

import logging
import re

from .config import (
    BASE_SCORE,
    EXPONENTIAL_PENALTY,
    LINEAR_PENALTY,
    LINEARITHMIC_PENALTY,
    NESTED_SCAN_WINDOW,
    POLYNOMIAL_PENALTY,
)
from .languages import DEFAULT_LANGUAGE, resolve_profile
from .models import (
    DetectorResult,
    EducationalContent,
    LineRecord,
    OverallComplexity,
    Pattern,
    Suggestion,
)
from .recognizers import (
    LoopRegion,
    is_collection_operation,
    is_hash_operation,
    is_recursive_call,
    scan_block,
)
from .templates import BASELINE_CONCEPT, NESTED_LOOP_HINT, PATTERN_CONCEPTS, RECURSION_HINT

logger = logging.getLogger(__name__)

_POLYNOMIAL = re.compile(r"n\^(\d+)")


def calculate_overall_complexity(patterns: list[Pattern]) -> OverallComplexity:
    """
    Fold detected patterns into the overall time label and score.

    Patterns are applied in detection order and each qualifying pattern
    overwrites the time label, so the result reflects the last qualifying
    pattern rather than the worst one.
    """
    time = "O(1)"
    score = BASE_SCORE

    for pattern in patterns:
        if "n^" in pattern.complexity:
            match = _POLYNOMIAL.search(pattern.complexity)
            exponent = int(match.group(1)) if match else 2
            time = f"O(n^{exponent})"
            score -= exponent * POLYNOMIAL_PENALTY
        elif pattern.complexity == "O(2^n)":
            time = "O(2^n)"
            score -= EXPONENTIAL_PENALTY
        elif pattern.complexity == "O(n log n)":
            time = "O(n log n)"
            score -= LINEARITHMIC_PENALTY
        elif pattern.complexity == "O(n)" and time == "O(1)":
            time = "O(n)"
            score -= LINEAR_PENALTY

    # Space inference is not performed
    return OverallComplexity(time=time, space="O(1)", score=max(0, min(BASE_SCORE, score)))


class StructuralDetector:
    """
    Line-oriented structural analysis.

    Takes code and a language tag, returns patterns, per-line labels,
    structural suggestions and educational content.
    """

    def __init__(self, code: str, language: str = DEFAULT_LANGUAGE):
        self.code = code
        self.profile = resolve_profile(language)
        self.lines = code.split("\n")

    def analyze(self) -> DetectorResult:
        patterns = self.detect_patterns()
        line_by_line = self.analyze_lines(patterns)
        suggestions = self.generate_suggestions(line_by_line, patterns)
        educational = self.generate_educational_content(patterns)
        overall = calculate_overall_complexity(patterns)

        logger.debug(
            f"Detector [{self.profile.id}]: {len(self.lines)} lines, "
            f"{len(patterns)} patterns, time={overall.time}, score={overall.score}"
        )

        return DetectorResult(
            overall=overall,
            line_by_line=line_by_line,
            patterns=patterns,
            suggestions=suggestions,
            educational=educational,
        )

    def detect_patterns(self) -> list[Pattern]:
        """
        Partition the lines into loop regions and recursion sites.

        Loop regions are consumed greedily: after a region the scan resumes
        on the line following its end.
        """
        patterns: list[Pattern] = []
        index = 0

        while index < len(self.lines):
            line = self.lines[index].strip()

            if self.profile.is_loop(line):
                region = scan_block(self.lines, index, self.profile, NESTED_SCAN_WINDOW)
                patterns.append(self._region_pattern(region))
                index = region.end + 1
                continue

            if is_recursive_call(line):
                patterns.append(Pattern(
                    kind="recursion",
                    start_line=index + 1,
                    end_line=index + 1,
                    complexity="O(2^n)",
                    description="Recursive function call detected",
                    impact="high",
                ))

            index += 1

        return patterns

    def _region_pattern(self, region: LoopRegion) -> Pattern:
        if region.is_nested:
            return Pattern(
                kind="nested",
                start_line=region.start + 1,
                end_line=region.end + 1,
                complexity=f"O(n^{region.max_depth})",
                description=f"Nested loops with depth {region.max_depth}",
                impact="high" if region.max_depth > 2 else "medium",
            )
        return Pattern(
            kind="loop",
            start_line=region.start + 1,
            end_line=region.end + 1,
            complexity="O(n)",
            description="Single loop over the input",
            impact="medium",
        )

    def analyze_lines(self, patterns: list[Pattern]) -> list[LineRecord]:
        nested_depths = {}
        for pattern in patterns:
            if pattern.kind != "nested":
                continue
            depth = int(_POLYNOMIAL.search(pattern.complexity).group(1))
            for line_number in range(pattern.start_line, pattern.end_line + 1):
                nested_depths[line_number] = depth

        records = []
        for index, text in enumerate(self.lines):
            line_number = index + 1
            complexity, reason, severity = self._classify_line(
                text.strip(), nested_depths.get(line_number, 0)
            )
            records.append(LineRecord(
                line_number=line_number,
                text=text,
                complexity=complexity,
                reason=reason,
                severity=severity,
            ))
        return records

    def _classify_line(self, line: str, nested_depth: int) -> tuple[str, str, str]:
        if nested_depth > 1:
            return f"O(n^{nested_depth})", f"Nested loop with depth {nested_depth}", "high"

        if self.profile.is_loop(line):
            return "O(n)", "Linear loop iteration", "medium"

        if is_recursive_call(line):
            return "O(2^n)", "Potential exponential recursion", "high"

        if is_collection_operation(line):
            return "O(n)", "Collection iteration or search", "medium"

        if is_hash_operation(line):
            return "O(1)", "Hash table lookup/insertion", "low"

        return "O(1)", "Constant time operation", "low"

    def generate_suggestions(self, line_by_line: list[LineRecord], patterns: list[Pattern]) -> list[Suggestion]:
        suggestions: list[Suggestion] = []

        for pattern in patterns:
            if pattern.kind == "nested" and pattern.impact == "high":
                suggestions.append(Suggestion(
                    line=pattern.start_line,
                    kind="optimization",
                    title="Reduce nested loop complexity",
                    description="Consider using hash maps, early termination, or breaking the problem into smaller functions.",
                    example=NESTED_LOOP_HINT,
                    priority="high",
                ))

            if pattern.kind == "recursion":
                suggestions.append(Suggestion(
                    line=pattern.start_line,
                    kind="algorithm",
                    title="Optimize recursion",
                    description="Consider using memoization, dynamic programming, or iterative approaches.",
                    example=RECURSION_HINT,
                    priority="high",
                ))

        # Generic fallback, one per line regardless of title
        covered = {suggestion.line for suggestion in suggestions}
        for record in line_by_line:
            if record.severity == "high" and record.line_number not in covered:
                suggestions.append(Suggestion(
                    line=record.line_number,
                    kind="refactor",
                    title="Simplify complex operation",
                    description="This line contributes significantly to overall complexity.",
                    priority="medium",
                ))
                covered.add(record.line_number)

        return suggestions

    def generate_educational_content(self, patterns: list[Pattern]) -> EducationalContent:
        concepts: list[str] = []
        explanations: dict[str, str] = {}
        examples: dict[str, str] = {}

        for pattern in patterns:
            entry = PATTERN_CONCEPTS.get(pattern.kind)
            if entry is None or entry[0] in explanations:
                continue
            concept, explanation, example = entry
            concepts.append(concept)
            explanations[concept] = explanation
            examples[concept] = example

        concept, explanation, example = BASELINE_CONCEPT
        concepts.append(concept)
        explanations[concept] = explanation
        examples[concept] = example

        return EducationalContent(concepts=concepts, explanations=explanations, examples=examples)
