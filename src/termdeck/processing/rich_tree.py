from rich.markup import escape
from rich.tree import Tree

from ..models import (
    Align,
    Blank,
    Block,
    Blockquote,
    CodeBlock,
    DefinitionList,
    Heading,
    Image,
    ListItem,
    OrderedList,
    Paragraph,
    Presentation,
    Table,
    UnorderedList,
)


def presentation_tree(presentation: Presentation, title: str) -> Tree:
    tree = Tree(f"[bold]{escape(title)}[/] ({presentation.total} slides)")
    for number, slide in enumerate(presentation.slides, start=1):
        slide_tree = tree.add(f"[bold]slide {number}[/]")
        for block in slide.blocks:
            _add_block(slide_tree, block)
    return tree


def _add_block(tree: Tree, block: Block) -> None:
    match block:
        case Heading(level=level, text=text):
            tree.add(f"[green]heading {level}[/] {escape(text)}")
        case Paragraph(text=text, scale=scale):
            suffix = f" [dim](scale {scale})[/]" if scale is not None else ""
            tree.add(f"[green]paragraph[/] {escape(text)}{suffix}")
        case CodeBlock(content=content, language=language):
            lines = len(content.splitlines())
            tree.add(f"[green]code[/] {escape(language or 'plain')}, {lines} lines")
        case UnorderedList(items=items):
            _add_items(tree.add("[green]unordered list[/]"), items)
        case OrderedList(items=items):
            _add_items(tree.add("[green]ordered list[/]"), items)
        case DefinitionList(term=term, definition=definition):
            subtree = tree.add(f"[green]definition[/] {escape(term)}")
            for line in definition.splitlines():
                subtree.add(escape(line))
        case Blockquote(content=content):
            subtree = tree.add("[green]blockquote[/]")
            for line in content.splitlines():
                subtree.add(escape(line))
        case Table(header=header, rows=rows):
            tree.add(f"[green]table[/] {len(header)} columns, {len(rows)} rows")
        case Align(alignment=alignment):
            tree.add(f"[blue]align {alignment.value}[/]")
        case Image(path=path, attrs=attrs):
            details = " ".join(f'{k}="{v}"' for k, v in attrs.items())
            tree.add(f"[green]image[/] {escape(path)} {escape(details)}".rstrip())
        case Blank():
            tree.add("[dim]blank[/]")


def _add_items(tree: Tree, items: tuple[ListItem, ...]) -> None:
    for item in items:
        tree.add(f"{'  ' * item.depth}{escape(item.text)}")
