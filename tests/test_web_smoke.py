from __future__ import annotations

from fastapi.testclient import TestClient

from pokertrainer.core.settings import TrainerSettings
from pokertrainer.web.app import create_app


def test_web_endpoints_scenario_flow() -> None:
    with TestClient(create_app(TrainerSettings(seed=5))) as client:
        r = client.get("/healthz")
        assert r.status_code == 200
        assert r.json() == {"status": "ok"}

        for street in ("preflop", "flop", "turn", "river"):
            r = client.get(f"/api/v1/scenario/{street}")
            assert r.status_code == 200
            scenario = r.json()
            assert scenario["scenario_type"] == street
            assert all(isinstance(card, str) and len(card) == 2 for card in scenario["hero_hole_cards"])

            r = client.post("/api/v1/action", json={"scenario": scenario, "user_action": "call"})
            assert r.status_code == 200
            review = r.json()
            assert review["message"] == "Action processed."
            assert "gto_advice" in review or "error" in review


def test_seeded_apps_deal_identical_scenarios() -> None:
    a = TestClient(create_app(TrainerSettings(seed=8)))
    b = TestClient(create_app(TrainerSettings(seed=8)))
    assert a.get("/api/v1/scenario/river").json() == b.get("/api/v1/scenario/river").json()
