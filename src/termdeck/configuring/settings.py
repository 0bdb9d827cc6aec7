from functools import reduce
from logging import getLogger
from pathlib import Path
from typing import Annotated, Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import BaseModel, Field, model_validator

from .. import app_name
from ..utils import load_all_yamls
from .theme import Theme

_logger = getLogger(__name__)

settings_filename = f"{app_name}.yml"


def user_config_dir() -> Path:
    return Path(appdirs_user_config_dir(app_name)).resolve()


class Settings(BaseModel):
    width: int = 80
    """Columns available to slide content. Zero or less disables wrapping."""

    default_scale: Annotated[int, Field(ge=1, le=7)] = 2
    """Scale of body text."""

    show_notes: bool = False
    """Whether speaker notes are rendered along with the slide content."""

    theme_file: Path | None = None
    theme: Theme = Field(default_factory=Theme)

    @model_validator(mode="after")
    def _load_theme_file(self) -> Self:
        if self.theme_file is not None and "theme" not in self.model_fields_set:
            self.theme = Theme.from_yaml(self.theme_file)
        return self

    @classmethod
    def from_yaml(cls, workdir: Path) -> Self:
        """Merge the settings files of the user config dir and of `workdir`.

        Values of the `workdir` settings file win over the user ones. Relative \
        `theme_file` values are resolved against the directory of the file that \
        defines them.

        Args:
            workdir: Directory of the presented document.

        Returns:
            The merged settings.
        """
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **b},
            (
                _resolve_theme_file(path, loaded or {})
                for path, loaded in load_all_yamls(
                    d / settings_filename
                    for d in (user_config_dir(), workdir.resolve())
                )
            ),
            {},
        )
        _logger.debug("Loaded settings %s", content)
        return cls.model_validate(content)


def _resolve_theme_file(path: Path, content: dict[str, Any]) -> dict[str, Any]:
    if "theme_file" in content:
        content["theme_file"] = path.parent / content["theme_file"]
    return content
