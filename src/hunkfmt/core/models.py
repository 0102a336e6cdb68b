"""Data models for hunks, classified lines, word-diff parts, and display rows"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LineKind(str, Enum):
    """Kind of a single hunk line, derived from its leading marker"""
    context = "context"
    added = "added"
    removed = "removed"


class RowKind(str, Enum):
    """Kind of a display row; separator rows sit between hunks"""
    context = "context"
    added = "added"
    removed = "removed"
    separator = "separator"


class StyleTag(str, Enum):
    """Display-agnostic style of a text segment; renderers map these to colors"""
    plain = "plain"
    context = "context"
    added_line = "added-line"
    removed_line = "removed-line"
    added_emphasis = "added-emphasis"
    removed_emphasis = "removed-emphasis"
    separator = "separator"


class Hunk(BaseModel):
    """A contiguous block of a unified diff. Starts are 1-based."""
    model_config = ConfigDict(frozen=True)

    old_start: int = Field(..., ge=1, description="First old-file line covered by the hunk")
    new_start: int = Field(..., ge=1, description="First new-file line covered by the hunk")
    lines:     tuple[str, ...] = Field(default=(), description="Raw lines prefixed with ' ', '-' or '+'")

    @property
    def old_lines(self) -> int:
        return sum(1 for line in self.lines if not line.startswith("+"))

    @property
    def new_lines(self) -> int:
        return sum(1 for line in self.lines if not line.startswith("-"))


class ClassifiedLine(BaseModel):
    """A raw hunk line split into its kind and marker-free text."""
    model_config = ConfigDict(frozen=True)

    text: str
    kind: LineKind


class PairingRelation(BaseModel):
    """Links a removed line to the added line it is word-diffed against."""
    model_config = ConfigDict(frozen=True)

    removed_index: int = Field(..., ge=0)
    added_index:   int = Field(..., ge=0)


class WordDiffPart(BaseModel):
    """One token run of a word diff; neither flag set means unchanged."""
    model_config = ConfigDict(frozen=True)

    value:   str
    added:   bool = False
    removed: bool = False

    @model_validator(mode="after")
    def _check_flags(self) -> "WordDiffPart":
        if self.added and self.removed:
            raise ValueError("a word diff part cannot be both added and removed")
        return self


class Segment(BaseModel):
    model_config = ConfigDict(frozen=True)

    text:  str
    style: StyleTag


class DisplayRow(BaseModel):
    """One renderable output line: a padded line number plus styled segments."""
    model_config = ConfigDict(frozen=True)

    line_number: str
    segments:    tuple[Segment, ...]
    kind:        RowKind

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.segments)
