import asyncio

import pytest

import frontend.web as webmod
from frontend.web import app as flask_app
from wordsuggest import Suggester

from conftest import VOCAB


@pytest.fixture
def client():
    yield flask_app.test_client()
    webmod.attach(None)


def _attach(**options) -> Suggester:
    s = Suggester(**options)
    asyncio.run(s.initialize(VOCAB))
    webmod.attach(s, vocab_size=len(VOCAB))
    return s


@pytest.mark.e2e
def test_suggest_api_json(client):
    _attach(engine="trie", max_suggestions=3)
    rv = client.get("/api/suggest?q=he")
    assert rv.status_code == 200
    data = rv.get_json()
    assert [r["word"] for r in data] == ["help", "hello", "health"]
    for key in ("word", "score", "kind"):
        assert key in data[0]
    assert data[0]["kind"] == "completion"


@pytest.mark.e2e
def test_suggest_api_edit_distance(client):
    _attach(engine="levenshtein", max_suggestions=3)
    data = client.get("/api/suggest?q=helt").get_json()
    assert [r["word"] for r in data][:2] == ["help", "health"]
    assert all(r["kind"] == "edit" for r in data)


@pytest.mark.e2e
def test_predict_api_respects_gate(client):
    _attach(engine="semantic")
    assert client.get("/api/predict?context=I%20love").get_json() == []

    _attach(engine="semantic", enable_next_word_prediction=True)
    data = client.get("/api/predict?context=I%20love").get_json()
    assert data and data[0]["kind"] == "next"


@pytest.mark.e2e
def test_health_reports_engine(client):
    _attach(engine="edit-distance")
    r = client.get("/health")
    assert r.status_code == 200
    data = r.get_json()
    assert data["ok"] is True
    assert data["engine"] == "edit-distance"
    assert data["vocabulary"] == len(VOCAB)


@pytest.mark.e2e
def test_not_ready_without_suggester(client):
    webmod.attach(None)
    assert client.get("/api/suggest?q=he").status_code == 503
    assert client.get("/health").status_code == 503


@pytest.mark.e2e
def test_home_page_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "<form" in html and "autocomplete" in html
