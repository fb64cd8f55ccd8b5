"""Tests for the structural detector."""

from complexity_engine.detector import StructuralDetector, calculate_overall_complexity
from complexity_engine.models import Pattern

from tests.samples import (
    DUPLICATES_PY,
    FIBONACCI_CPP,
    FIBONACCI_PY,
    NESTED_SEARCH_CPP,
    SINGLE_LOOP_CPP,
    TRIPLE_LOOP_CPP,
)


def _pattern(complexity: str, kind: str = "nested") -> Pattern:
    return Pattern(
        kind=kind,
        start_line=1,
        end_line=1,
        complexity=complexity,
        description="test",
        impact="high",
    )


class TestLineClassification:
    def test_single_loop_lines(self):
        result = StructuralDetector(SINGLE_LOOP_CPP, "cpp").analyze()
        labels = [(r.complexity, r.severity) for r in result.line_by_line]

        assert labels == [
            ("O(n)", "medium"),
            ("O(1)", "low"),
            ("O(1)", "low"),
        ]
        assert result.line_by_line[1].reason == "Hash table lookup/insertion"
        assert result.line_by_line[2].reason == "Constant time operation"

    def test_lines_inside_nested_region_are_polynomial(self):
        result = StructuralDetector(NESTED_SEARCH_CPP, "cpp").analyze()

        assert all(r.complexity == "O(n^2)" for r in result.line_by_line)
        assert all(r.severity == "high" for r in result.line_by_line)

    def test_recursive_call_line(self):
        result = StructuralDetector(FIBONACCI_CPP, "cpp").analyze()
        record = result.line_by_line[2]

        assert record.complexity == "O(2^n)"
        assert record.severity == "high"
        assert record.reason == "Potential exponential recursion"

    def test_collection_operation(self):
        result = StructuralDetector("idx = names.indexOf(target);", "java").analyze()

        assert result.line_by_line[0].complexity == "O(n)"
        assert result.line_by_line[0].reason == "Collection iteration or search"

    def test_text_is_kept_untrimmed(self):
        result = StructuralDetector("    x = 1;", "cpp").analyze()
        assert result.line_by_line[0].text == "    x = 1;"

    def test_unknown_language_uses_c_family_loops(self):
        result = StructuralDetector(SINGLE_LOOP_CPP, "cobol").analyze()
        assert result.line_by_line[0].complexity == "O(n)"

    def test_python_loop_header(self):
        result = StructuralDetector("for x in items:\n    print(x)", "python").analyze()
        assert result.line_by_line[0].complexity == "O(n)"


class TestPatterns:
    def test_single_loop_emits_loop_pattern(self):
        patterns = StructuralDetector(SINGLE_LOOP_CPP, "cpp").detect_patterns()

        assert len(patterns) == 1
        assert patterns[0].kind == "loop"
        assert patterns[0].complexity == "O(n)"
        assert (patterns[0].start_line, patterns[0].end_line) == (1, 3)

    def test_nested_pattern_depth_two(self):
        patterns = StructuralDetector(NESTED_SEARCH_CPP, "cpp").detect_patterns()

        assert len(patterns) == 1
        assert patterns[0].kind == "nested"
        assert patterns[0].complexity == "O(n^2)"
        assert patterns[0].impact == "medium"
        assert (patterns[0].start_line, patterns[0].end_line) == (1, 5)

    def test_nested_pattern_depth_three_is_high_impact(self):
        patterns = StructuralDetector(TRIPLE_LOOP_CPP, "cpp").detect_patterns()

        assert patterns[0].complexity == "O(n^3)"
        assert patterns[0].impact == "high"

    def test_python_indentation_nesting(self):
        patterns = StructuralDetector(DUPLICATES_PY, "python").detect_patterns()

        assert [p.kind for p in patterns] == ["recursion", "nested"]
        nested = patterns[1]
        assert (nested.start_line, nested.end_line) == (3, 6)
        assert nested.complexity == "O(n^2)"

    def test_sequential_python_loops_are_not_nested(self):
        code = "for i in a:\n    x += i\nfor j in b:\n    y += j"
        patterns = StructuralDetector(code, "python").detect_patterns()

        assert [p.kind for p in patterns] == ["loop", "loop"]
        assert [(p.start_line, p.end_line) for p in patterns] == [(1, 2), (3, 4)]

    def test_python_def_counts_as_recursion(self):
        patterns = StructuralDetector(FIBONACCI_PY, "python").detect_patterns()

        assert [p.start_line for p in patterns] == [1, 4]
        assert all(p.kind == "recursion" for p in patterns)

    def test_loop_region_is_consumed(self):
        # The recursive call inside the loop body is not reported separately
        code = "for (int i = 0; i < n; i++) {\n    total += walk(i-1);\n}"
        result = StructuralDetector(code, "cpp").analyze()

        assert [p.kind for p in result.patterns] == ["loop"]
        assert result.line_by_line[1].complexity == "O(2^n)"
        assert result.overall.time == "O(n)"

    def test_unclosed_block_stops_at_window(self):
        code = "for (int i = 0; i < n; i++) {\n" + "    x++;\n" * 40
        patterns = StructuralDetector(code, "cpp").detect_patterns()

        assert patterns[0].end_line == 20


class TestOverallComplexity:
    def test_no_patterns(self):
        overall = calculate_overall_complexity([])
        assert (overall.time, overall.space, overall.score) == ("O(1)", "O(1)", 100)

    def test_last_qualifying_pattern_wins(self):
        overall = calculate_overall_complexity([_pattern("O(n^3)"), _pattern("O(2^n)", "recursion")])
        assert overall.time == "O(2^n)"
        assert overall.score == 0

        overall = calculate_overall_complexity([_pattern("O(2^n)", "recursion"), _pattern("O(n^2)")])
        assert overall.time == "O(n^2)"
        assert overall.score == 20

    def test_linear_only_counts_first(self):
        overall = calculate_overall_complexity([_pattern("O(n)", "loop"), _pattern("O(n)", "loop")])
        assert (overall.time, overall.score) == ("O(n)", 90)

    def test_linear_ignored_after_worse(self):
        overall = calculate_overall_complexity([_pattern("O(2^n)", "recursion"), _pattern("O(n)", "loop")])
        assert (overall.time, overall.score) == ("O(2^n)", 60)

    def test_linearithmic(self):
        overall = calculate_overall_complexity([_pattern("O(n log n)", "algorithm")])
        assert (overall.time, overall.score) == ("O(n log n)", 85)

    def test_score_is_clamped(self):
        overall = calculate_overall_complexity([_pattern("O(n^4)"), _pattern("O(n^4)")])
        assert overall.score == 0

    def test_space_is_always_constant(self):
        overall = calculate_overall_complexity([_pattern("O(n^2)")])
        assert overall.space == "O(1)"


class TestSuggestionsAndEducation:
    def test_high_impact_nested_suggestion(self):
        result = StructuralDetector(TRIPLE_LOOP_CPP, "cpp").analyze()
        first = result.suggestions[0]

        assert first.title == "Reduce nested loop complexity"
        assert first.line == 1
        assert first.priority == "high"

    def test_generic_fallback_skips_lines_with_suggestions(self):
        result = StructuralDetector(TRIPLE_LOOP_CPP, "cpp").analyze()
        lines = [s.line for s in result.suggestions]

        assert lines == [1, 2, 3, 4, 5, 6, 7]
        assert all(s.title == "Simplify complex operation" for s in result.suggestions[1:])

    def test_recursion_suggestion(self):
        result = StructuralDetector(FIBONACCI_CPP, "cpp").analyze()

        assert len(result.suggestions) == 1
        assert result.suggestions[0].title == "Optimize recursion"
        assert result.suggestions[0].line == 3

    def test_medium_nested_gets_only_generic_suggestions(self):
        result = StructuralDetector(NESTED_SEARCH_CPP, "cpp").analyze()
        assert {s.title for s in result.suggestions} == {"Simplify complex operation"}

    def test_educational_order(self):
        result = StructuralDetector(DUPLICATES_PY, "python").analyze()
        assert result.educational.concepts == ["Recursion", "Nested Loops", "Big O Notation"]
        assert set(result.educational.explanations) == set(result.educational.concepts)
        assert set(result.educational.examples) == set(result.educational.concepts)

    def test_baseline_concept_always_present(self):
        result = StructuralDetector("x = 1;", "cpp").analyze()
        assert result.educational.concepts == ["Big O Notation"]

    def test_loop_pattern_adds_no_concept(self):
        result = StructuralDetector(SINGLE_LOOP_CPP, "cpp").analyze()
        assert result.educational.concepts == ["Big O Notation"]
