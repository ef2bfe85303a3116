"""HTTP 接口测试 - 建靴、查询、发牌、计分"""

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient  # noqa: E402

from src.web.server import app  # noqa: E402


@pytest.fixture
def client():
    client = TestClient(app)
    resp = client.post("/shoe", json={"num_decks": 1, "cutoff": 0.75})
    assert resp.status_code == 200
    return client


class TestShoeEndpoints:

    def test_new_shoe(self, client):
        resp = client.post("/shoe", json={"num_decks": 2, "cutoff": 75})
        body = resp.json()
        assert body["num_decks"] == 2
        assert body["remaining"] == 104
        assert body["percent_remaining"] == 100
        assert body["past_cutoff"] is False

    def test_invalid_deck_count(self, client):
        resp = client.post("/shoe", json={"num_decks": 0})
        assert resp.status_code == 422

    def test_status(self, client):
        body = client.get("/shoe").json()
        assert body["remaining"] == 52
        assert body["cutoff"] == 0.75


class TestDealEndpoint:

    def test_deal_one(self, client):
        body = client.post("/deal").json()
        assert len(body["cards"]) == 1
        assert body["cards"][0]["image_name"].endswith(".png")
        assert body["shoe"]["remaining"] == 51

    def test_deal_many(self, client):
        body = client.post("/deal", params={"num": 5}).json()
        assert len(body["cards"]) == 5
        assert body["shoe"]["remaining"] == 47

    def test_insufficient_cards_conflict(self, client):
        client.post("/deal", params={"num": 50})
        resp = client.post("/deal", params={"num": 3})
        assert resp.status_code == 409
        assert client.get("/shoe").json()["remaining"] == 2

    def test_ace_value_serialized(self, client):
        client.post("/shoe", json={"num_decks": 1})
        cards = client.post("/deal", params={"num": 52}).json()["cards"]
        ace = next(card for card in cards if card["rank"] == "ace")
        assert ace["value"] == [1, 11]


class TestScoreEndpoint:

    def test_blackjack(self, client):
        body = client.post("/score", json={"cards": ["AS.png", "KH.png"]}).json()
        assert body == {"score": 21, "bust": False, "below_hard_17": False, "soft": True}

    def test_bust(self, client):
        body = client.post("/score", json={"cards": ["KS", "KD", "KC"]}).json()
        assert body["score"] == 30
        assert body["bust"] is True

    def test_below_hard_17(self, client):
        body = client.post("/score", json={"cards": ["1S.png", "6D.png"]}).json()
        assert body["score"] == 16
        assert body["below_hard_17"] is True

    def test_unknown_card(self, client):
        resp = client.post("/score", json={"cards": ["XX.png"]})
        assert resp.status_code == 422
