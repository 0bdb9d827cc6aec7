"""Parse Markdown-like slide decks and lay them out on a character grid."""

from typing import Any

__version__ = "0.3.0"

app_name = "termdeck"


def __getattr__(name: str) -> Any:
    """Lazy-load the public entry points of the termdeck package.

    The cli entry point sets up logging before anything else is loaded. Importing \
    the parsing and layout modules eagerly from this file would defeat that, since \
    loading termdeck.cli entails loading termdeck first.

    Args:
        name: Name of the attribute to load.

    Raises:
        AttributeError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "parse" | "parse_slide" | "parse_inline" | "split":
            from . import parsing

            return getattr(parsing, name)
        case "wrap" | "display_width":
            from . import layout

            return getattr(layout, name)
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise AttributeError(msg)
