import json

import pytest

from docshelf.cli import main


@pytest.fixture
def db(tmp_path):
    return str(tmp_path / "shelf.db")


@pytest.fixture
def notes(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("Apples are red. Bananas are yellow.", encoding="utf-8")
    return path


def _ids(db, capsys):
    assert main(["--store", db, "ls"]) == 0
    out = capsys.readouterr().out
    return [line.split()[1] for line in out.splitlines()]


def test_add_and_list(db, notes, capsys):
    assert main(["--store", db, "add", str(notes)]) == 0
    capsys.readouterr()

    assert main(["--store", db, "ls"]) == 0
    out = capsys.readouterr().out
    assert "notes.txt" in out
    assert out.startswith("*")


def test_empty_list(db, capsys):
    assert main(["--store", db, "ls"]) == 0
    assert "No documents stored" in capsys.readouterr().out


def test_add_reports_unsupported_files(db, tmp_path):
    pdf = tmp_path / "paper.pdf"
    pdf.write_bytes(b"%PDF-1.4")
    assert main(["--store", db, "add", str(pdf)]) == 1


def test_add_unknown_path_fails(db, tmp_path):
    assert main(["--store", db, "add", str(tmp_path / "missing")]) == 1


def test_query_prints_context(db, notes, capsys):
    main(["--store", db, "add", str(notes)])
    capsys.readouterr()

    assert main(["--store", db, "query", "apples"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("=== RELEVANT DOCUMENT CONTEXT ===")
    assert "[Source: notes.txt, Chunk 1]" in out


def test_query_json(db, notes, capsys):
    main(["--store", db, "add", str(notes)])
    capsys.readouterr()

    assert main(["--store", db, "query", "bananas", "--json"]) == 0
    rows = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert len(rows) == 1
    assert rows[0]["document_name"] == "notes.txt"
    assert rows[0]["score"] == 1


def test_toggle_remove_and_stats(db, notes, capsys):
    main(["--store", db, "add", str(notes)])
    capsys.readouterr()
    [doc_id] = _ids(db, capsys)

    assert main(["--store", db, "toggle", doc_id]) == 0
    assert main(["--store", db, "stats"]) == 0
    assert "Documents: 0/1 active" in capsys.readouterr().out

    assert main(["--store", db, "query", "apples", "--json"]) == 0
    assert capsys.readouterr().out == ""

    assert main(["--store", db, "rm", doc_id]) == 0
    assert main(["--store", db, "rm", doc_id]) == 1
    assert main(["--store", db, "toggle", doc_id]) == 1


def test_show_and_clear(db, notes, capsys):
    main(["--store", db, "add", str(notes)])
    capsys.readouterr()
    [doc_id] = _ids(db, capsys)

    assert main(["--store", db, "show", doc_id]) == 0
    out = capsys.readouterr().out
    assert "Document: notes.txt" in out
    assert "--- Chunk 1" in out

    assert main(["--store", db, "clear"]) == 0
    assert main(["--store", db, "show", doc_id]) == 1


def test_corrupt_zip_is_reported_and_remaining_sources_added(db, notes, tmp_path, capsys):
    broken = tmp_path / "broken.zip"
    broken.write_bytes(b"not a zip at all")

    assert main(["--store", db, "add", str(broken), str(notes)]) == 1
    capsys.readouterr()

    assert main(["--store", db, "ls"]) == 0
    assert "notes.txt" in capsys.readouterr().out


def test_add_folder_skips_binary_files(db, tmp_path, capsys):
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "guide.txt").write_text("Turn it off and on again.", encoding="utf-8")
    (docs / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")

    assert main(["--store", db, "add", str(docs)]) == 0
    capsys.readouterr()

    assert main(["--store", db, "stats"]) == 0
    assert "Documents: 1/1 active" in capsys.readouterr().out
