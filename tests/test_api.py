import pytest
from fastapi.testclient import TestClient

import api.index as index
from jee_score import FetchError
from jee_score.config import Settings


class FakeSheet:
    def __init__(self, fail=False):
        self.rows = []
        self.fail = fail

    def append(self, scored, contact=None, source_url=None):
        if self.fail:
            raise RuntimeError("quota exceeded")
        self.rows.append((scored.exam_id, contact, source_url))


@pytest.fixture()
def recorder():
    return FakeSheet()


@pytest.fixture()
def client(store, recorder):
    return TestClient(index.create_app(settings=Settings(), store=store, recorder=recorder))


def test_health(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"status": "Live", "answer_keys": 2}


def test_calculate_from_html(client, recorder, response_sheet_html):
    resp = client.post("/calculate", json={"html": response_sheet_html, "phone": "9999999999"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "success"
    assert data["exam_id"] == "2025-01-22-shift-1"
    assert data["total"] == 11
    assert data["unattempted"] == 4
    assert data["subjects"]["physics"]["correct"] == 2
    assert "Estimated Score" in data["report"]
    assert recorder.rows == [("2025-01-22-shift-1", "9999999999", None)]


def test_calculate_from_url(client, monkeypatch, response_sheet_html):
    seen = {}

    def fake_fetch(url, timeout, user_agent):
        seen["url"] = url
        return response_sheet_html

    monkeypatch.setattr(index, "fetch_document", fake_fetch)
    data = client.post("/calculate", json={"url": "https://cdn3.digialm.com/sheet.html"}).json()
    assert data["status"] == "success"
    assert seen["url"] == "https://cdn3.digialm.com/sheet.html"


def test_fetch_failure_is_reported(client, monkeypatch):
    def fake_fetch(url, timeout, user_agent):
        raise FetchError("404 Client Error")

    monkeypatch.setattr(index, "fetch_document", fake_fetch)
    data = client.post("/calculate", json={"url": "https://example.com/x.html"}).json()
    assert data["status"] == "error"
    assert data["kind"] == "fetch"


def test_unrecognized_document(client):
    data = client.post("/calculate", json={"html": "<html>nothing here</html>"}).json()
    assert data["status"] == "error"
    assert data["kind"] == "parse"


def test_unpublished_key(client, response_sheet_html):
    html = response_sheet_html.replace("22/01/2025", "29/01/2025")
    data = client.post("/calculate", json={"html": html}).json()
    assert data["kind"] == "key"
    assert data["message"] == "Results are not yet available for this session."


@pytest.mark.parametrize("date", ["22 Jan 2025", "22/01/25", "²2/01/2025"])
def test_malformed_date(client, response_sheet_html, date):
    html = response_sheet_html.replace("22/01/2025", date)
    resp = client.post("/calculate", json={"html": html})
    assert resp.status_code == 200
    assert resp.json()["kind"] == "date"


def test_requires_exactly_one_source(client):
    assert client.post("/calculate", json={}).json()["kind"] == "input"
    both = client.post("/calculate", json={"url": "https://x", "html": "<html/>"}).json()
    assert both["kind"] == "input"


def test_recording_failure_does_not_fail_request(store, response_sheet_html):
    app = index.create_app(settings=Settings(), store=store, recorder=FakeSheet(fail=True))
    data = TestClient(app).post("/calculate", json={"html": response_sheet_html}).json()
    assert data["status"] == "success"
