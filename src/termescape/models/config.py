"""Configuration models for termescape."""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from termescape.renderer import ResetPolicy, StyleToken
from termescape.sequences import CSI, color, color_background
from termescape.themes import get_theme


class SequenceSpec(BaseModel):
    """A theme entry given as a concrete sequence or literal text."""

    code: Optional[str] = Field(
        default=None, pattern=r"^[0-9;]*$", description="Raw SGR parameters, e.g. '1;31'"
    )
    color: Optional[int] = Field(default=None, ge=0, le=255)
    rgb: Optional[tuple[int, int, int]] = None
    text: Optional[str] = None
    background: bool = False

    @model_validator(mode="after")
    def check_one_source(self) -> "SequenceSpec":
        """Exactly one of code, color, rgb or text must be given."""
        given = [
            field
            for field in ("code", "color", "rgb", "text")
            if getattr(self, field) is not None
        ]
        if len(given) != 1:
            raise ValueError("expected exactly one of code, color, rgb or text")
        if self.rgb is not None and not all(0 <= part <= 5 for part in self.rgb):
            raise ValueError("rgb components must be within 0..5")
        return self

    def to_sequence(self) -> str:
        """Return the escape sequence (or literal text) of this entry."""
        if self.text is not None:
            return self.text
        if self.code is not None:
            return f"{CSI}{self.code}m"
        make = color_background if self.background else color
        if self.rgb is not None:
            return make(*self.rgb)
        return make(self.color)


ThemeEntry = Union[str, SequenceSpec, list[Union[str, SequenceSpec]]]


def _to_theme_value(entry: Any) -> Any:
    if isinstance(entry, str):
        return StyleToken(entry)
    if isinstance(entry, SequenceSpec):
        return entry.to_sequence()
    return [_to_theme_value(item) for item in entry]


class ThemeConfig(BaseModel):
    """Theme entries as stored in the config file.

    A string is an alias for another name, a list is a composite of names
    and sequences, and a mapping is a SequenceSpec.
    """

    entries: dict[str, ThemeEntry] = Field(default_factory=dict)

    def to_theme(self) -> dict[str, Any]:
        """Convert the entries to a theme mapping for the renderer."""
        return {name: _to_theme_value(entry) for name, entry in self.entries.items()}


class Config(BaseModel):
    """Main configuration model."""

    version: str = "1.0.0"

    theme_name: Optional[str] = "default"
    theme: ThemeConfig = Field(default_factory=ThemeConfig)

    # Rendering settings
    emit: Optional[bool] = Field(
        default=None, description="Emit escape sequences; None detects the terminal"
    )
    reset: Optional[Literal["always", "never", "auto"]] = None

    log_level: str = "WARNING"

    def build_theme(self) -> dict[str, Any]:
        """Merge the named built-in theme with the custom entries."""
        theme = get_theme(self.theme_name) if self.theme_name else {}
        theme.update(self.theme.to_theme())
        return theme

    def render_options(self) -> dict[str, Any]:
        """Keyword options for ``render`` and ``format``."""
        return {
            "theme": self.build_theme(),
            "emit": self.emit,
            "reset": ResetPolicy(self.reset) if self.reset else None,
        }
