"""Tests for the language catalog, profile resolution and detection."""

import pytest

from complexity_engine.languages import (
    SUPPORTED_LANGUAGES,
    detect_language,
    get_language_info,
    resolve_profile,
)


def test_catalog_ids():
    assert [lang.id for lang in SUPPORTED_LANGUAGES] == ["cpp", "java", "python"]


@pytest.mark.parametrize("tag, expected", [
    ("cpp", "cpp"),
    ("PYTHON ", "python"),
    ("Java", "java"),
    ("rust", "cpp"),
    ("", "cpp"),
    (None, "cpp"),
])
def test_resolve_profile(tag, expected):
    assert resolve_profile(tag).id == expected


def test_get_language_info():
    assert get_language_info("python").name == "Python"
    assert get_language_info("go") is None


@pytest.mark.parametrize("line, language, expected", [
    ("for (int i = 0; i < n; i++) {", "cpp", True),
    ("while(x > 0)", "java", True),
    ("for x in items:", "python", True),
    ("while queue:", "python", True),
    ("for x in items:", "cpp", False),
    ("for (int i = 0; i < n; i++) {", "python", False),
    ("before = 1;", "cpp", False),
    ("format(x)", "cpp", False),
])
def test_loop_header_recognition(line, language, expected):
    assert resolve_profile(language).is_loop(line) is expected


@pytest.mark.parametrize("filename, expected", [
    ("main.py", "python"),
    ("Solver.JAVA", "java"),
    ("matrix.hpp", "cpp"),
])
def test_detect_by_extension(filename, expected):
    assert detect_language("", filename) == expected


def test_unknown_extension_falls_back_to_keywords():
    assert detect_language("def f():\n    return len(x)", "notes.txt") == "python"


def test_detect_by_keywords():
    assert detect_language("#include <vector>\nint main() { std::cout << 1; }") == "cpp"
    assert detect_language("public class Main { public static void main() {} }") == "java"
    assert detect_language("import os\nprint(len(os.listdir()))") == "python"


def test_detect_tie_goes_to_later_language():
    # "class" scores once for C++ and once for Python
    assert detect_language("class Foo") == "python"


def test_detect_defaults_to_cpp():
    assert detect_language("x = 1") == "cpp"
    assert detect_language("") == "cpp"
