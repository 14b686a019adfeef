from pathlib import Path

import pytest

from jee_score import AnswerKeyStore

FIXTURES = Path(__file__).parent / "fixtures"

INFO_ROWS = [
    ("Application No", "240310099999"),
    ("Candidate Name", "Ravi Kumar"),
    ("Roll No", "DL02004567"),
    ("Test Date", "24/01/2025"),
    ("Test Time", "3:00 PM - 6:00 PM"),
]


def info_table(rows=INFO_ROWS):
    cells = "".join(f"<tr><td>{label}</td><td>{value}</td></tr>" for label, value in rows)
    return f'<table style="width:500px">{cells}</table>'


def mcq_panel(question_id, chosen, options=4):
    opts = "".join(
        f"<tr><td>Option {n} ID :</td><td>{question_id}{n}</td></tr>" for n in range(1, options + 1)
    )
    return (
        '<div class="question-pnl"><table><tr><td><table>'
        "<tr><td>Question Type :</td><td>MCQ</td></tr>"
        f"<tr><td>Question ID :</td><td>{question_id}</td></tr>"
        f"{opts}"
        f"<tr><td>Chosen Option :</td><td>{chosen}</td></tr>"
        "</table></td></tr></table></div>"
    )


def sa_panel(question_id, given):
    return (
        '<div class="question-pnl"><table><tr><td><table>'
        f'<tr><td>Given Answer :</td><td class="bold" style="word-break: break-word;">{given}</td></tr>'
        "</table></td><td><table>"
        "<tr><td>Question Type :</td><td>SA</td></tr>"
        f"<tr><td>Question ID :</td><td>{question_id}</td></tr>"
        "</table></td></tr></table></div>"
    )


def section(label, *panels):
    return f'<div class="section-cntnr"><div class="section-lbl">{label}</div>{"".join(panels)}</div>'


def sheet(*parts, rows=INFO_ROWS):
    return f"<html><body>{info_table(rows)}{''.join(parts)}</body></html>"


@pytest.fixture()
def response_sheet_html():
    return (FIXTURES / "response_sheet.html").read_text(encoding="utf-8")


@pytest.fixture()
def answer_keys_path():
    return FIXTURES / "answer_keys.json"


@pytest.fixture()
def store(answer_keys_path):
    return AnswerKeyStore.from_json(answer_keys_path)
