from termdeck.models import (
    Align,
    Alignment,
    Blank,
    Blockquote,
    CodeBlock,
    DefinitionList,
    Heading,
    Image,
    ListItem,
    OrderedList,
    Paragraph,
    Slide,
    Table,
    UnorderedList,
)
from termdeck.parsing import parse_slide


def test_headings() -> None:
    slide = parse_slide("# Title\n## Sub\n### Deep\n###### Six\n####### Seven\n")

    assert slide.blocks == (
        Heading(1, "Title"),
        Heading(2, "Sub"),
        Heading(3, "Deep"),
        Heading(6, "Six"),
        Paragraph("####### Seven"),
    )
    scales = [b.scale for b in slide.blocks if isinstance(b, Heading)]
    assert scales == [4, 3, 2, 2]


def test_unordered_list() -> None:
    slide = parse_slide("* foo\n- bar\n* baz\n")

    assert slide.blocks == (
        UnorderedList((ListItem("foo"), ListItem("bar"), ListItem("baz"))),
    )


def test_nested_unordered_list() -> None:
    slide = parse_slide("* top\n  * nested\n    * deep\n")

    assert slide.blocks == (
        UnorderedList(
            (ListItem("top", 0), ListItem("nested", 1), ListItem("deep", 2))
        ),
    )


def test_unordered_list_continuation_lines() -> None:
    slide = parse_slide("* first line\n  continuation\n* second\nafter\n")

    assert slide.blocks == (
        UnorderedList((ListItem("first line continuation"), ListItem("second"))),
        Paragraph("after"),
    )


def test_ordered_list() -> None:
    slide = parse_slide("1. one\n2. two\n7. three\n   1. nested\n")

    assert slide.blocks == (
        OrderedList(
            (
                ListItem("one", 0),
                ListItem("two", 0),
                ListItem("three", 0),
                ListItem("nested", 1),
            )
        ),
    )


def test_definition_list() -> None:
    slide = parse_slide("Rabbit\n:   a presentation tool\n")

    assert slide.blocks == (DefinitionList("Rabbit", "a presentation tool"),)


def test_multi_line_definition() -> None:
    slide = parse_slide("term\n:   line 1\n    line 2\n:   line 3\nafter\n")

    assert slide.blocks == (
        DefinitionList("term", "line 1\nline 2\nline 3"),
        Paragraph("after"),
    )


def test_definition_marker_takes_exactly_three_spaces() -> None:
    slide = parse_slide("term\n:    too far\n")

    assert slide.blocks == (Paragraph("term"), Paragraph(":    too far"))


def test_overindented_marker_ends_definition() -> None:
    slide = parse_slide("term\n:   first\n:    too far\n")

    assert slide.blocks == (
        DefinitionList("term", "first"),
        Paragraph(":    too far"),
    )


def test_term_without_definition_is_a_paragraph() -> None:
    slide = parse_slide("just a line\nanother line\n")

    assert slide.blocks == (Paragraph("just a line"), Paragraph("another line"))


def test_fenced_code() -> None:
    slide = parse_slide("```ruby\nputs 'hi'\n\n  indented\n```\nafter\n")

    assert slide.blocks == (
        CodeBlock("puts 'hi'\n\n  indented\n", "ruby"),
        Paragraph("after"),
    )


def test_fenced_code_without_language() -> None:
    assert parse_slide("```\nsome code\n```\n").blocks == (CodeBlock("some code\n"),)


def test_unterminated_fence_runs_to_the_end() -> None:
    assert parse_slide("```\n# code\n").blocks == (CodeBlock("# code\n"),)


def test_fenced_code_language_override() -> None:
    slide = parse_slide('```\nx = 1\n```\n{: lang="python"}\n')

    assert slide.blocks == (CodeBlock("x = 1\n", "python"),)


def test_indented_code() -> None:
    slide = parse_slide("    # comment\n    def foo\n      bar\n    end\ntext\n")

    assert slide.blocks == (
        CodeBlock("# comment\ndef foo\n  bar\nend\n"),
        Paragraph("text"),
    )


def test_indented_code_language_override() -> None:
    slide = parse_slide('    def foo\n      bar\n    end\n{: lang="ruby"}\n')

    assert slide.blocks == (CodeBlock("def foo\n  bar\nend\n", "ruby"),)


def test_blockquote() -> None:
    slide = parse_slide("> line 1\n>line 2\nafter\n")

    assert slide.blocks == (Blockquote("line 1\nline 2"), Paragraph("after"))


def test_table() -> None:
    slide = parse_slide("| H1 | H2 |\n|:---|---:|\n| a | b |\n| c | d |\n")

    assert slide.blocks == (Table(("H1", "H2"), (("a", "b"), ("c", "d"))),)


def test_table_with_only_a_separator_is_empty() -> None:
    slide = parse_slide("|---|\n")

    assert slide.blocks == (Table(()),)
    assert Table(()).columns == 0


def test_comment_regions_are_skipped() -> None:
    slide = parse_slide("before\n{::comment}\nhidden\n{:/comment}\nafter\n")

    assert slide.blocks == (Paragraph("before"), Paragraph("after"))


def test_unterminated_comment_skips_to_the_end() -> None:
    slide = parse_slide("before\n{::comment}\nhidden\n")

    assert slide.blocks == (Paragraph("before"),)


def test_alignment_directives() -> None:
    slide = parse_slide("{:.center}\ncentered\n  {:.right}  \nright\nleft\n")

    assert slide.blocks == (
        Align(Alignment.Center),
        Paragraph("centered"),
        Align(Alignment.Right),
        Paragraph("right"),
        Paragraph("left"),
    )
    assert list(slide.aligned_blocks()) == [
        (Alignment.Center, Paragraph("centered")),
        (Alignment.Right, Paragraph("right")),
        (None, Paragraph("left")),
    ]


def test_image() -> None:
    slide = parse_slide('![logo](img/logo.png){:relative_height="60"}\n')

    assert slide.blocks == (
        Image("img/logo.png", {"relative_height": "60"}, alt="logo"),
    )


def test_blank_lines() -> None:
    slide = parse_slide("a\n\n   \nb\n")

    assert slide.blocks == (Paragraph("a"), Blank(), Blank(), Paragraph("b"))


def test_paragraph_scale() -> None:
    slide = parse_slide('{::tag name="x-large"}Big{:/tag} words\nsmall words\n')

    assert slide.blocks == (
        Paragraph('{::tag name="x-large"}Big{:/tag} words', 4),
        Paragraph("small words"),
    )


def test_empty_slide() -> None:
    assert parse_slide("") == Slide()


def test_title_slide() -> None:
    slide = parse_slide(
        "# Title\n\nsubtitle\n:   My Subtitle\n\nauthor\n:   Author Name\n"
    )

    assert slide.blocks == (
        Heading(1, "Title"),
        Blank(),
        DefinitionList("subtitle", "My Subtitle"),
        Blank(),
        DefinitionList("author", "Author Name"),
    )


def test_malformed_input_never_fails() -> None:
    slide = parse_slide("|\n*\n1.\n>\n```\n{::comment\n")

    assert slide.blocks
