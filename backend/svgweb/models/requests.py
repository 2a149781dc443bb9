"""Request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EditRequest(BaseModel):
    """Substitutions and target dimensions for one SVG render."""

    model_config = ConfigDict(frozen=True)

    width: str | None = Field(default=None, description="Target width (numeric string)")
    height: str | None = Field(default=None, description="Target height (numeric string)")
    text_replacements: dict[str, str] = Field(
        default_factory=dict,
        description="Element id -> replacement text",
    )
    color_replacements: dict[str, str] = Field(
        default_factory=dict,
        description="Element id -> fill color",
    )

    @property
    def has_dimensions(self) -> bool:
        return bool(self.width) or bool(self.height)
