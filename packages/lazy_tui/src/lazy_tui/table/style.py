"""Table appearance: border characters, padding and selection colours."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lazy_tui.theme import validate_hex_color


class BorderCharacters(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    top_junction: str
    bottom_junction: str
    left_junction: str
    right_junction: str
    cross: str

    @classmethod
    def rounded(cls) -> BorderCharacters:
        return cls(
            top_left="╭", top_right="╮", bottom_left="╰", bottom_right="╯",
            horizontal="─", vertical="│",
            top_junction="┬", bottom_junction="┴",
            left_junction="├", right_junction="┤", cross="┼",
        )

    @classmethod
    def square(cls) -> BorderCharacters:
        return cls(
            top_left="┌", top_right="┐", bottom_left="└", bottom_right="┘",
            horizontal="─", vertical="│",
            top_junction="┬", bottom_junction="┴",
            left_junction="├", right_junction="┤", cross="┼",
        )

    @classmethod
    def ascii(cls) -> BorderCharacters:
        return cls(
            top_left="+", top_right="+", bottom_left="+", bottom_right="+",
            horizontal="-", vertical="|",
            top_junction="+", bottom_junction="+",
            left_junction="+", right_junction="+", cross="+",
        )


class TableStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    border_characters: BorderCharacters = Field(default_factory=BorderCharacters.rounded)
    cell_padding: int = Field(default=1, ge=0)
    header_separator: bool = True
    selection_color: str = "#3B82F6"
    selection_text_color: str = "#FFFFFF"

    @field_validator("selection_color", "selection_text_color")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        return validate_hex_color(value)
