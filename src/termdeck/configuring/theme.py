"""Colors and font used by renderers, loadable from yaml files.

A theme file only needs to specify the values it changes, e.g.

    colors:
      background: "1e1e2e"
    font:
      family: "HackGen"

Unspecified values keep their defaults.
"""

from pathlib import Path
from re import compile as re_compile
from typing import Annotated, Self

from pydantic import AfterValidator, BaseModel, Field

from ..exceptions import ThemeNotFoundError
from ..utils import load_yaml

_hex_color = re_compile(r"[0-9a-fA-F]{6}")


def _check_hex_color(value: str) -> str:
    if not _hex_color.fullmatch(value):
        msg = f"{value!r} is not a 6 digits hex color"
        raise ValueError(msg)
    return value.lower()


HexColor = Annotated[str, AfterValidator(_check_hex_color)]


class Colors(BaseModel):
    background: HexColor = "000000"
    foreground: HexColor = "ffffff"
    code_bg: HexColor = "313244"
    dim: HexColor = "6c7086"
    inline_code: HexColor = "a6e3a1"
    heading: HexColor | None = None
    """Color of headings. Uses the foreground color if unset."""


class Font(BaseModel):
    family: str | None = None


class Theme(BaseModel):
    colors: Colors = Field(default_factory=Colors)
    font: Font = Field(default_factory=Font)

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load a theme file, falling back to defaults for what it doesn't set.

        Args:
            path: Path to the yaml theme file.

        Raises:
            ThemeNotFoundError: Raised if there is no file at `path`.

        Returns:
            The loaded theme.
        """
        if not path.is_file():
            msg = f"theme file not found: {path}"
            raise ThemeNotFoundError(msg)
        return cls.model_validate(load_yaml(path) or {})
