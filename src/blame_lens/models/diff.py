"""Condensed diff model."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CondensedDiff(BaseModel):
    """An elided rendering of one change's diff for one file.

    Attributes:
        rendered_text: Newline separated output lines
        selected_position: 1-based line within rendered_text matching the
            caller's line of interest, or the last line when nothing matched
    """

    model_config = ConfigDict(frozen=True)

    rendered_text: str = Field(..., description="Condensed, line-oriented diff rendering")
    selected_position: int = Field(..., description="1-based selected line in rendered_text")

    @field_validator("selected_position")
    @classmethod
    def validate_position(cls, v: int) -> int:
        """Validate that the selected position is 1-based."""
        if v < 1:
            raise ValueError(f"selected_position is 1-based, got {v}")
        return v

    @property
    def lines(self) -> List[str]:
        """Rendered output split into lines."""
        return self.rendered_text.split("\n")

    @property
    def selected_line(self) -> str:
        """Text of the selected output line."""
        return self.lines[self.selected_position - 1]
