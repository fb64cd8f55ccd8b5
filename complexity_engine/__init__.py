"""Heuristic engine for code complexity analysis."""

from .models import (
    AnalysisResult,
    EducationalContent,
    LineRecord,
    OverallComplexity,
    Pattern,
    Suggestion,
)
from .languages import SUPPORTED_LANGUAGES, LanguageProfile, detect_language, resolve_profile
from .analyzer import CodeComplexityAnalyzer, analyze

__all__ = [
    "AnalysisResult",
    "EducationalContent",
    "LineRecord",
    "OverallComplexity",
    "Pattern",
    "Suggestion",
    "SUPPORTED_LANGUAGES",
    "LanguageProfile",
    "detect_language",
    "resolve_profile",
    "CodeComplexityAnalyzer",
    "analyze",
]
