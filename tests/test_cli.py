"""Tests for the mdfixtures command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdfixtures import FEATURE_SHOWCASE, STREAMING_RESPONSE, TOC_CONTENT, build_long_document
from mdfixtures.cli import main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty directory so no stray config file is found."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.parametrize(
    ("name", "content"),
    [
        ("feature-showcase", FEATURE_SHOWCASE),
        ("streaming-response", STREAMING_RESPONSE),
        ("toc-content", TOC_CONTENT),
    ],
)
def test_prints_fixture(name: str, content: str, capsys: pytest.CaptureFixture[str]):
    assert main([name]) == 0
    assert capsys.readouterr().out == content


def test_long_document_sections(capsys: pytest.CaptureFixture[str]):
    assert main(["long-document", "--sections", "3"]) == 0
    assert capsys.readouterr().out == build_long_document(3)


def test_long_document_default_sections(capsys: pytest.CaptureFixture[str]):
    assert main(["long-document"]) == 0
    assert capsys.readouterr().out == build_long_document()


def test_long_document_zero_sections(capsys: pytest.CaptureFixture[str]):
    assert main(["long-document", "-n", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_negative_sections_is_error(capsys: pytest.CaptureFixture[str]):
    assert main(["long-document", "--sections", "-2"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: sections must be non-negative" in captured.err


def test_unknown_fixture_is_error(capsys: pytest.CaptureFixture[str]):
    assert main(["nope"]) == 1
    assert "Unknown fixture 'nope'" in capsys.readouterr().err


def test_no_fixture_is_error(capsys: pytest.CaptureFixture[str]):
    assert main([]) == 1
    assert "No fixture specified" in capsys.readouterr().err


def test_output_file(tmp_path: Path):
    target = tmp_path / "out" / "big.md"
    assert main(["long-document", "-n", "5", "-o", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == build_long_document(5)


def test_list(capsys: pytest.CaptureFixture[str]):
    assert main(["--list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == [
        "feature-showcase",
        "streaming-response",
        "toc-content",
        "long-document",
    ]


def test_features(capsys: pytest.CaptureFixture[str]):
    assert main(["--features"]) == 0
    out = capsys.readouterr().out
    assert "feature-showcase: " in out
    assert "block_math" in out
    assert "Uncovered" not in out


def test_version(capsys: pytest.CaptureFixture[str]):
    assert main(["--version"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("v") or out == "unknown (package not installed)"


def test_stream_replays_content(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    delays: list[float] = []
    monkeypatch.setattr("mdfixtures.cli.time.sleep", delays.append)
    assert main(["toc-content", "--stream", "--speed", "4"]) == 0
    assert capsys.readouterr().out == TOC_CONTENT
    assert len(delays) == len(TOC_CONTENT)
    assert max(delays) == pytest.approx(0.02)


def test_stream_with_output_is_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["toc-content", "--stream", "-o", str(tmp_path / "x.md")]) == 1
    assert "--stream" in capsys.readouterr().err


def test_stream_bad_speed_is_error(capsys: pytest.CaptureFixture[str]):
    assert main(["toc-content", "--stream", "--speed", "0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "speed must be positive" in captured.err


def test_config_supplies_defaults(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "mdfixtures.toml").write_text('fixture = "long-document"\nsections = 2\n')
    assert main([]) == 0
    assert capsys.readouterr().out == build_long_document(2)


def test_cli_flags_beat_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "mdfixtures.toml").write_text('fixture = "toc-content"\nsections = 2\n')
    assert main(["long-document", "--sections", "4"]) == 0
    assert capsys.readouterr().out == build_long_document(4)


def test_bad_config_is_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "mdfixtures.toml").write_text('fixture = "missing"\n')
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "mdfixtures.toml: unknown fixture 'missing'" in captured.err


def test_failed_write_keeps_existing_output(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    target = tmp_path / "toc.md"
    target.write_text("previous good content", encoding="utf-8")

    def write_then_fail(self: Path, data: str, encoding: str | None = None) -> int:
        with open(self, "w", encoding=encoding) as f:
            f.write(data[:10])
        raise OSError("disk full")

    monkeypatch.setattr(Path, "write_text", write_then_fail)
    assert main(["toc-content", "-o", str(target)]) == 2
    monkeypatch.undo()

    assert "disk full" in capsys.readouterr().err
    assert target.read_text(encoding="utf-8") == "previous good content"
