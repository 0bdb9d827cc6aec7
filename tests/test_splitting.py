from termdeck.models import Heading, Paragraph
from termdeck.parsing import parse, split


def test_splits_on_level_1_headings() -> None:
    chunks = split("# Slide 1\n\ncontent\n\n# Slide 2\n\nmore\n")

    assert chunks == ["# Slide 1\n\ncontent\n\n", "# Slide 2\n\nmore\n"]


def test_does_not_split_on_deeper_headings() -> None:
    assert len(split("# Title\n\n## Sub-heading\n\n### Sub-sub\n")) == 1


def test_does_not_split_inside_fenced_code() -> None:
    chunks = split("# Slide 1\n\n```ruby\n# not a heading\n```\n\n# Slide 2\n")

    assert len(chunks) == 2
    assert "# not a heading" in chunks[0]


def test_indented_fence_toggles_too() -> None:
    chunks = split("# A\n  ```\n# inside\n  ```\n# B\n")

    assert len(chunks) == 2


def test_preamble_becomes_its_own_slide() -> None:
    chunks = split("preamble text\n\n# First Slide\n")

    assert chunks == ["preamble text\n\n", "# First Slide\n"]


def test_blank_preamble_stays_with_first_slide() -> None:
    chunks = split("\n\n# First\ntext\n# Second\n")

    assert chunks == ["\n\n# First\ntext\n", "# Second\n"]


def test_no_heading_gives_a_single_chunk() -> None:
    assert split("just text\nand more") == ["just text\nand more"]
    assert split("") == [""]


def test_hash_without_space_is_not_a_slide() -> None:
    assert len(split("# A\n#hashtag\n")) == 1


def test_bare_hash_line_is_not_a_slide() -> None:
    assert split("# A\n#\ntext\n") == ["# A\n#\ntext\n"]
    assert len(split("# A\n#\r\n# B\n")) == 2
    assert len(split("# A\n#\ttabbed\n")) == 2


def test_bare_hash_line_parses_as_a_paragraph() -> None:
    (slide,) = parse("# A\n#\n").slides

    assert slide.blocks == (Heading(1, "A"), Paragraph("#"))


def test_chunks_reconstruct_the_document() -> None:
    documents = [
        "",
        "\n",
        "intro\n# A\nbody\n```\n# x\n```\n# B",
        "  \n# A\r\n# B\r\n",
        "```\n# unterminated fence\n# still code\n",
        "# A\n#\n# B\n",
    ]
    for document in documents:
        assert "".join(split(document)) == document


def test_parse_builds_one_slide_per_chunk() -> None:
    presentation = parse(
        "# Title\n\nsubtitle\n:   My Presentation\n\n"
        "# Content\n\n* item 1\n* item 2\n\n# End\n\nThank you\n"
    )

    assert presentation.total == 3
    assert [slide.blocks[0] for slide in presentation.slides] == [
        Heading(1, "Title"),
        Heading(1, "Content"),
        Heading(1, "End"),
    ]
