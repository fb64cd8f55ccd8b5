"""
Pydantic models for the Complexity Analyzer API.
"""
from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from complexity_api.config import settings
from complexity_engine import AnalysisResult


class AnalyzeRequest(BaseModel):
    """Request payload for code analysis."""
    code: str = Field(..., description="Source code to analyze")
    language: str = Field(default=settings.DEFAULT_LANGUAGE, max_length=50, description="Language id (auto for detection)")
    filename: str = Field(default="untitled", max_length=255, description="Filename, used for language detection")

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        if len(v) > settings.MAX_CODE_LENGTH:
            raise ValueError(f"Code exceeds {settings.MAX_CODE_LENGTH} characters")
        return v

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        return v.strip().lower() or "auto"

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        # Remove path separators and null bytes
        v = re.sub(r"[/\\]", "", v.strip()).replace("\x00", "")
        return v or "untitled"


class AnalyzeResponse(BaseModel):
    """API response wrapper."""
    success: bool = Field(default=True)
    language: str = Field(..., description="Language profile used for the analysis")
    result: AnalysisResult


class LanguageInfo(BaseModel):
    """Supported language entry."""
    id: str
    name: str
    extensions: list[str]
    keywords: list[str]


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = Field(default=False)
    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(default=None, description="Additional error details")
