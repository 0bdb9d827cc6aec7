from pathlib import Path

from . import app


@app.command()
def tree(document: Path, /) -> None:
    """Show the slides and blocks parsed from DOCUMENT.

    Args:
        document: Path to the document to parse
    """
    from rich import print as rich_print

    from ..parsing import load
    from ..processing.rich_tree import presentation_tree

    rich_print(presentation_tree(load(document), document.name))
