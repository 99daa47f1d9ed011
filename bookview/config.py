from __future__ import annotations
import os
from pydantic import BaseModel, Field


class RenderSettings(BaseModel):
    font_size: float = Field(default=24, gt=0, description="Base font size of body text")
    font_family: str = Field(default="Georgia", description="Font family of body text")
    color: str = Field(default="black", description="Text color")
    ref_color: str = Field(default="blue", description="Color of reference (link) text")
    ref_hover_color: str = Field(default="purple", description="Color of reference text under the pointer")

    @classmethod
    def from_env(cls, prefix: str = "BOOKVIEW_") -> "RenderSettings":
        """Build settings from environment variables, falling back to defaults."""
        defaults = cls()
        return cls(
            font_size=os.environ.get(f"{prefix}FONT_SIZE", defaults.font_size),
            font_family=os.environ.get(f"{prefix}FONT_FAMILY", defaults.font_family),
            color=os.environ.get(f"{prefix}COLOR", defaults.color),
            ref_color=os.environ.get(f"{prefix}REF_COLOR", defaults.ref_color),
            ref_hover_color=os.environ.get(f"{prefix}REF_HOVER_COLOR", defaults.ref_hover_color),
        )
