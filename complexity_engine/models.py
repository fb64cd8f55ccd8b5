"""
Data models for heuristic complexity analysis.

Pydantic models produced by the detector and optimizer. Every model is frozen:
results are built once per analysis call and never mutated afterwards.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Level = Literal["low", "medium", "high"]


class LineRecord(BaseModel):
    """Per-line complexity annotation."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=1, description="1-based line number")
    text: str = Field(..., description="Original line text, untrimmed")
    complexity: str = Field(..., description="Big-O label for this line")
    reason: str = Field(..., description="Why the label was assigned")
    severity: Level = Field(..., description="Contribution to overall cost")


class Pattern(BaseModel):
    """A structural region such as a loop block or a recursive call."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["loop", "recursion", "nested", "algorithm"]
    start_line: int = Field(..., ge=1, description="First line of the region")
    end_line: int = Field(..., ge=1, description="Last line of the region")
    complexity: str = Field(..., description="Big-O label for the region")
    description: str
    impact: Level


class Suggestion(BaseModel):
    """Improvement suggestion anchored to a line."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="Line the suggestion refers to")
    kind: Literal["optimization", "refactor", "algorithm"]
    title: str = Field(..., description="Short title, part of the identity key")
    description: str
    example: Optional[str] = Field(default=None, description="Canned example rewrite")
    priority: Level

    @property
    def key(self) -> tuple[int, str]:
        """Identity used for deduplication."""
        return (self.line, self.title)


class OverallComplexity(BaseModel):
    """
    Aggregate complexity summary.

    Space is always reported as O(1); space inference is not performed.
    """

    model_config = ConfigDict(frozen=True)

    time: str = Field(default="O(1)", description="Time complexity in Big-O notation")
    space: str = Field(default="O(1)", description="Space complexity in Big-O notation")
    score: int = Field(default=100, ge=0, le=100, description="Efficiency score")


class EducationalContent(BaseModel):
    """Concepts explained alongside the analysis."""

    model_config = ConfigDict(frozen=True)

    concepts: list[str] = Field(default_factory=list)
    explanations: dict[str, str] = Field(default_factory=dict)
    examples: dict[str, str] = Field(default_factory=dict)


class DetectorResult(BaseModel):
    """Output of the structural detector, before optimizer suggestions are merged."""

    model_config = ConfigDict(frozen=True)

    overall: OverallComplexity
    line_by_line: list[LineRecord]
    patterns: list[Pattern]
    suggestions: list[Suggestion]
    educational: EducationalContent


class AnalysisResult(BaseModel):
    """Complete analysis result returned to callers."""

    model_config = ConfigDict(frozen=True)

    language: str = Field(..., description="Language profile used for the analysis")
    overall: OverallComplexity
    line_by_line: list[LineRecord] = Field(default_factory=list)
    patterns: list[Pattern] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    educational: EducationalContent = Field(default_factory=EducationalContent)
