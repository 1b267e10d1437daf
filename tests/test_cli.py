"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from srcdoc.cli import _build_parser, main
from tests._fixtures.source_builder import SourceBuilder


def test_cli_parses_output_dir_and_files() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--output-dir", "out/", "a.c", "a.h"])
    assert args.output_dir == "out/"
    assert args.files == ["a.c", "a.h"]
    assert args.verbose is False
    assert args.allow_bang is None


def test_cli_accepts_no_files() -> None:
    args = _build_parser().parse_args([])
    assert args.files == []
    assert args.output_dir is None


def test_cli_exits_with_status_one_on_bad_arguments() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _build_parser().parse_args(["--no-such-flag"])
    assert excinfo.value.code == 1


def test_main_writes_markdown_into_default_directory(
    source_builder: SourceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    paths = source_builder.write({"foo.c": "/**\n * @file foo\n */\n"})

    main(paths)

    output_dir = source_builder.root / "src-doc"
    assert (output_dir / "foo.md").read_text(encoding="utf-8") == "# @file foo\n \n"
    assert (output_dir / "README.md").exists()
    assert "Wrote 2 files" in capsys.readouterr().out


def test_main_uses_config_output_dir(source_builder: SourceBuilder) -> None:
    (source_builder.root / ".srcdoc.yml").write_text("output_dir: generated\n", encoding="utf-8")
    paths = source_builder.write({"foo.c": "/** @function foo*/\n"})

    main(["--output-dir", "cli-out", *paths])
    assert (source_builder.root / "cli-out" / "foo.md").exists()

    main(paths)
    assert (source_builder.root / "generated" / "foo.md").exists()


def test_main_exits_with_status_two_on_unterminated_comment(
    source_builder: SourceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    paths = source_builder.write({"bad.c": "/** never closed\n"})

    with pytest.raises(SystemExit) as excinfo:
        main(paths)

    assert excinfo.value.code == 2
    assert "bad.c" in capsys.readouterr().err
    assert not (source_builder.root / "src-doc").exists()


def test_main_exits_with_status_one_on_missing_input(source_builder: SourceBuilder) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["missing.c"])
    assert excinfo.value.code == 1


def test_main_dry_run_prints_plan(
    source_builder: SourceBuilder, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    paths = source_builder.write({"foo.c": "/** @file foo*/\n"})

    main(["--dry-run", "--output-dir", str(tmp_path / "plan"), *paths])

    out = capsys.readouterr().out
    assert "dry-run" in out
    assert "foo.md" in out
    assert not (tmp_path / "plan").exists()


def test_main_exits_with_status_one_on_index_collision(
    source_builder: SourceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    paths = source_builder.write({"README.c": "/** @file readme*/\n"})

    with pytest.raises(SystemExit) as excinfo:
        main(paths)

    assert excinfo.value.code == 1
    assert "README.c" in capsys.readouterr().err
