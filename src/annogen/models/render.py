"""Render output models - rendered lines, jump markers and placement"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class JumpMarker(BaseModel):
    """Zero-indexed cursor target inside the rendered lines"""
    line: int
    col: int


class Placement(BaseModel):
    """Where the host should insert the annotation"""
    kind: Literal["position", "append", "default"] = "default"

    # kind == "position": absolute coordinates
    row: Optional[int] = None
    col: Optional[int] = None

    # kind == "append": relative to a child node
    child_name: Optional[str] = None
    fallback: Optional[str] = None
    relative: Optional[Literal["before", "after"]] = None


class RenderedAnnotation(BaseModel):
    """Final annotation text with its jump markers"""
    lines: List[str] = Field(default_factory=list)
    markers: List[JumpMarker] = Field(default_factory=list)
    convention: Optional[str] = None
    placement: Optional[Placement] = None

    @property
    def first_marker(self) -> Optional[JumpMarker]:
        """Where the cursor lands right after insertion"""
        return self.markers[0] if self.markers else None

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def with_prefix(self, prefix: str) -> "RenderedAnnotation":
        """Copy with ``prefix`` prepended to every line, markers shifted"""
        return self.model_copy(
            update={
                "lines": [prefix + line for line in self.lines],
                "markers": [
                    JumpMarker(line=m.line, col=m.col + len(prefix)) for m in self.markers
                ],
            }
        )
