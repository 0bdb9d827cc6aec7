from pathlib import Path

from . import app


@app.command()
def print_settings(*, workdir: Path = Path()) -> None:
    """Print the resolved settings.

    Args:
        workdir: Directory whose settings file should be merged over the user one
    """
    from rich import print as rich_print

    from ..configuring.settings import Settings

    rich_print(Settings.from_yaml(workdir))
