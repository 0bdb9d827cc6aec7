from pathlib import Path
from typing import Any
from unittest.mock import patch

from pytest import CaptureFixture, fixture, raises

from termdeck.cli import main
from termdeck.configuring import settings as settings_module

DOCUMENT = """\
# Termdeck

subtitle
:   A *terminal* deck

# Content

{:.center}
Hello {::tag name="red"}world{:/tag}{::note}remember to smile{:/note}

* item 1
  * nested item

| Name | Value |
|------|-------|
| a    | 1     |
"""


@fixture
def document(tmp_path: Path, monkeypatch: Any) -> Path:
    user_dir = tmp_path / "user"
    user_dir.mkdir()
    monkeypatch.setattr(settings_module, "user_config_dir", lambda: user_dir)
    path = tmp_path / "deck" / "slides.md"
    path.parent.mkdir()
    path.write_text(DOCUMENT, encoding="utf8")
    return path


def run_termdeck(*args: str) -> None:
    with patch("sys.argv", ["termdeck", *args]):
        try:
            main()
        except SystemExit as e:
            if e.code:
                raise e


def test_tree(document: Path, capsys: CaptureFixture[str]) -> None:
    run_termdeck("tree", str(document))

    out = capsys.readouterr().out
    assert "2 slides" in out
    assert "heading 1" in out
    assert "definition" in out
    assert "align center" in out
    assert "2 columns, 1 rows" in out


def test_preview(document: Path, capsys: CaptureFixture[str]) -> None:
    run_termdeck("preview", str(document), "--width", "40")

    out = capsys.readouterr().out
    assert "1 / 2" in out
    assert "2 / 2" in out
    assert "Hello world" in out
    assert "remember to smile" not in out
    assert "nested item" in out


def test_preview_with_notes(document: Path, capsys: CaptureFixture[str]) -> None:
    run_termdeck("preview", str(document), "--notes")

    assert "remember to smile" in capsys.readouterr().out


def test_preview_reads_settings(document: Path, capsys: CaptureFixture[str]) -> None:
    (document.parent / "termdeck.yml").write_text("show_notes: true\n")

    run_termdeck("preview", str(document))

    assert "remember to smile" in capsys.readouterr().out


def test_missing_document(tmp_path: Path) -> None:
    with raises(SystemExit) as e:
        run_termdeck("tree", str(tmp_path / "missing.md"))
    assert e.value.code == 1


def test_print_settings(document: Path, capsys: CaptureFixture[str]) -> None:
    run_termdeck("print-settings", "--workdir", str(document.parent))

    assert "default_scale=2" in capsys.readouterr().out
