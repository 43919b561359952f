from __future__ import annotations

import json
from pathlib import Path

import pymupdf
import pytest

from blogprint.cli.render_blog import main as render_blog_main
from blogprint.errors import GENERIC_FAILURE_MESSAGE, AssemblyError
from blogprint.rendering.assembler import OutputAssembler


def _write_record(path: Path, **overrides: object) -> None:
    payload: dict[str, object] = {
        "_id": "65f1c0ffee",
        "title": "Quiet Mornings, Loud Ideas",
        "content": "<h2>Why mornings</h2><p>Morning pages are a habit worth keeping.</p>",
        "category": "perspective",
        "createdAt": "2024-03-05T09:30:00Z",
        "author": {"name": "Ada Writer"},
    }
    payload.update(overrides)
    path.write_text(json.dumps(payload), encoding="utf-8")


def test_cli_renders_record_to_pdf(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    record_path = tmp_path / "record.json"
    _write_record(record_path)
    output_dir = tmp_path / "out"

    exit_code = render_blog_main(["--record", str(record_path), "--output-dir", str(output_dir)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["id"] == "65f1c0ffee"
    assert payload["filename"] == "quiet_mornings_loud_ideas.pdf"
    assert payload["pages"] == 2

    pdf_path = Path(payload["path"])
    assert pdf_path.parent == output_dir
    assert payload["bytes"] == pdf_path.stat().st_size
    with pymupdf.open(pdf_path) as pdf:
        assert pdf.page_count == 2
        assert "Why mornings" in pdf[1].get_text()


def test_cli_renders_html_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    html_path = tmp_path / "post.html"
    html_path.write_text("<p>Plain HTML body rendered from a file.</p>", encoding="utf-8")

    exit_code = render_blog_main(
        [
            "--html",
            str(html_path),
            "--title",
            "From A File",
            "--author",
            "Grace Editor",
            "--date",
            "2023-11-09",
            "--output-dir",
            str(tmp_path),
        ]
    )
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["id"] == "post"
    assert (tmp_path / "from_a_file.pdf").exists()


def test_cli_rejects_incomplete_record(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    record_path = tmp_path / "record.json"
    _write_record(record_path, author=None)

    exit_code = render_blog_main(["--record", str(record_path), "--output-dir", str(tmp_path)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 2
    assert "author" in payload["error"]
    assert not list(tmp_path.glob("*.pdf"))


def test_cli_reports_generic_failure(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _fail(self: OutputAssembler, document: object) -> object:
        raise AssemblyError("disk quota exceeded")

    monkeypatch.setattr(OutputAssembler, "assemble", _fail)
    record_path = tmp_path / "record.json"
    _write_record(record_path)

    exit_code = render_blog_main(["--record", str(record_path), "--output-dir", str(tmp_path)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert payload == {"error": GENERIC_FAILURE_MESSAGE}
    assert not list(tmp_path.glob("*.pdf"))


def test_cli_reports_unwritable_output_dir(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    record_path = tmp_path / "record.json"
    _write_record(record_path)
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("occupied", encoding="utf-8")

    exit_code = render_blog_main(["--record", str(record_path), "--output-dir", str(blocker)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert str(blocker) in payload["error"]
    assert blocker.read_text(encoding="utf-8") == "occupied"
