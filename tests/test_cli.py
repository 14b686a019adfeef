import json

import app
from conftest import FIXTURES, mcq_panel, section, sheet


def test_prints_report(capsys, answer_keys_path):
    code = app.main([str(FIXTURES / "response_sheet.html"), "--keys", str(answer_keys_path)])
    assert code == 0
    assert "Estimated Score" in capsys.readouterr().out


def test_prints_json(capsys, answer_keys_path):
    code = app.main([str(FIXTURES / "response_sheet.html"), "--keys", str(answer_keys_path), "--json"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["exam_id"] == "2025-01-22-shift-1"
    assert payload["total_score"] == 11
    assert payload["unattempted_count"] == 4


def test_domain_error_exits_non_zero(capsys, tmp_path, answer_keys_path):
    page = tmp_path / "page.html"
    page.write_text("<html>Session expired</html>")
    assert app.main([str(page), "--keys", str(answer_keys_path)]) == 1
    assert "Unrecognized document" in capsys.readouterr().err


def test_reads_sheet_in_page_declared_encoding(capsys, tmp_path, answer_keys_path):
    rows = [
        ("Candidate Name", "Zoë Verma"),
        ("Test Date", "22/01/2025"),
        ("Test Time", "9:00 AM - 12:00 PM"),
    ]
    html = sheet(section("Physics", mcq_panel("1001", "2")), rows=rows).replace(
        "<html>", '<html><head><meta charset="windows-1252"></head>'
    )
    page = tmp_path / "sheet.html"
    page.write_bytes(html.encode("cp1252"))

    assert app.main([str(page), "--keys", str(answer_keys_path)]) == 0
    out = capsys.readouterr().out
    assert "<code>Zoë Verma</code>" in out
