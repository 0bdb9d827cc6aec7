from pathlib import Path

from . import app


@app.command()
def preview(
    document: Path,
    /,
    *,
    width: int | None = None,
    scale: int | None = None,
    notes: bool | None = None,
) -> None:
    """Print the slides of DOCUMENT wrapped as they would be laid out.

    Options left unset are read from the settings files.

    Args:
        document: Path to the document to preview
        width: Columns available to slide content, 0 to disable wrapping
        scale: Scale of body text, between 1 and 7
        notes: Show speaker notes
    """
    from logging import getLogger

    from rich.console import Console
    from rich.rule import Rule

    from ..configuring.settings import Settings
    from ..parsing import load
    from ..processing.rich_preview import SlidePreviewer

    settings = Settings.from_yaml(document.parent)
    overrides = {"width": width, "default_scale": scale, "show_notes": notes}
    settings = Settings.model_validate(
        settings.model_dump()
        | {key: value for key, value in overrides.items() if value is not None}
    )
    presentation = load(document)
    getLogger(__name__).info(
        "Previewing %d slides at %d columns", presentation.total, settings.width
    )
    console = Console(highlight=False)
    previewer = SlidePreviewer(settings)
    for number, slide in enumerate(presentation.slides, start=1):
        console.print(Rule(f"{number} / {presentation.total}"))
        for renderable in previewer.preview(slide):
            console.print(renderable, soft_wrap=True)
