"""Tests for the HTTP service: sessions, draws, state transfer, fork and noise grids."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient

from seedforge.api.app import create_app
from seedforge.api.dependencies import RegistryUnavailableError, get_config, get_registry
from seedforge.config import ForgeConfig
from seedforge.noise import ValueNoise
from seedforge.noise.fractal import fbm
from seedforge.systems.rng import SeededRNG

API = "/api/v1"


@pytest.fixture
def client():
    config = ForgeConfig(max_batch_size=100, max_sessions=8, max_noise_grid=32, log_level="WARNING")
    with TestClient(create_app(config)) as c:
        yield c


def _create(client, seed="api", algorithm="pcg"):
    resp = client.post(f"{API}/generators", json={"seed": seed, "algorithm": algorithm})
    assert resp.status_code == 201, resp.text
    return resp.json()


def _draw(client, gid, kind="random", count=5, **params):
    return client.post(f"{API}/generators/{gid}/draw", json={"kind": kind, "count": count, "params": params})


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestConfigEndpoint:
    def test_config(self, client):
        data = client.get(f"{API}/config").json()
        assert data["default_algorithm"] == "xoshiro128**"
        assert len(data["algorithms"]) == 6
        assert data["max_batch_size"] == 100
        assert data["active_sessions"] == 0

    def test_registry_lives_with_the_app(self):
        config = ForgeConfig(log_level="WARNING")
        with TestClient(create_app(config)):
            assert get_config(get_registry()) is config
        with pytest.raises(RegistryUnavailableError):
            get_registry()

    def test_error_replies_are_documented(self, client):
        schema = client.get("/openapi.json").json()
        assert "ErrorResponse" in schema["components"]["schemas"]
        draw = schema["paths"][f"{API}/generators/{{session_id}}/draw"]["post"]["responses"]
        assert {"404", "409", "422"} <= set(draw)
        noise = schema["paths"][f"{API}/noise/{{kind}}"]["get"]["responses"]
        assert "422" in noise


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

class TestSessions:
    def test_create_resolves_alias(self, client):
        info = _create(client)
        assert info["algorithm"] == "pcg32"
        assert info["seed"] == "api"
        assert info["id"].startswith("gen-")

    def test_create_with_defaults(self, client):
        resp = client.post(f"{API}/generators", json={})
        assert resp.status_code == 201
        assert resp.json()["algorithm"] == "xoshiro128**"
        assert resp.json()["seed"] == 42

    def test_unknown_algorithm_is_422(self, client):
        resp = client.post(f"{API}/generators", json={"seed": 1, "algorithm": "mt19937"})
        assert resp.status_code == 422
        assert "Unknown algorithm" in resp.json()["detail"]

    def test_get_and_delete(self, client):
        gid = _create(client)["id"]
        assert client.get(f"{API}/generators/{gid}").status_code == 200
        assert client.delete(f"{API}/generators/{gid}").status_code == 204
        assert client.get(f"{API}/generators/{gid}").status_code == 404
        assert client.delete(f"{API}/generators/{gid}").status_code == 404

    def test_unknown_session_is_404(self, client):
        assert _draw(client, "gen-999").status_code == 404

    def test_session_limit(self, client):
        for i in range(8):
            _create(client, seed=i)
        resp = client.post(f"{API}/generators", json={"seed": 99})
        assert resp.status_code == 409


# ---------------------------------------------------------------------------
# Draws
# ---------------------------------------------------------------------------

class TestDraws:
    def test_draws_match_local_generator(self, client):
        gid = _create(client)["id"]
        values = _draw(client, gid, count=5).json()["values"]
        local = SeededRNG("api", "pcg32")
        assert values == [local.random() for _ in range(5)]

    def test_draws_continue_the_stream(self, client):
        gid = _create(client, algorithm="sfc32")["id"]
        first = _draw(client, gid, kind="random_int", count=3).json()["values"]
        second = _draw(client, gid, kind="random_int", count=3).json()["values"]
        local = SeededRNG("api", "sfc32")
        assert first + second == [local.random_int() for _ in range(6)]

    def test_draw_with_params(self, client):
        gid = _create(client)["id"]
        values = _draw(client, gid, kind="integer", count=50, low=1, high=6).json()["values"]
        assert all(isinstance(v, int) and 1 <= v <= 6 for v in values)

    def test_special_values(self, client):
        gid = _create(client)["id"]
        uuid = _draw(client, gid, kind="uuid", count=1).json()["values"][0]
        assert uuid[14] == "4"
        colour = _draw(client, gid, kind="color", count=1).json()["values"][0]
        assert colour.startswith("#") and len(colour) == 7

    def test_domain_error_is_422(self, client):
        gid = _create(client)["id"]
        resp = _draw(client, gid, kind="beta", count=1, alpha=0, beta=1)
        assert resp.status_code == 422
        assert "Alpha and beta must be positive" in resp.json()["detail"]

    def test_bad_parameter_name_is_422(self, client):
        gid = _create(client)["id"]
        assert _draw(client, gid, kind="normal", count=1, sigma=3).status_code == 422

    def test_batch_limit(self, client):
        gid = _create(client)["id"]
        assert _draw(client, gid, count=101).status_code == 422
        assert _draw(client, gid, count=0).status_code == 422

    def test_unknown_kind_is_422(self, client):
        gid = _create(client)["id"]
        assert _draw(client, gid, kind="dice").status_code == 422

    @pytest.mark.parametrize("kind,params", [
        ("exponential", {"lam": 0}),
        ("weibull", {"shape": 0}),
        ("pareto", {"alpha": 0}),
        ("triangular", {"low": 2, "high": 1, "mode": 1.5}),
        ("binomial", {"n": "5", "p": 0.5}),
        ("binomial", {"n": 3, "p": "x"}),
    ])
    def test_degenerate_parameters_leave_session_untouched(self, client, kind, params):
        info = _create(client)
        resp = _draw(client, info["id"], kind=kind, count=3, **params)
        assert resp.status_code == 422
        after = client.get(f"{API}/generators/{info['id']}").json()
        assert after["fingerprint"] == info["fingerprint"]

    def test_failed_batch_does_not_skip_values(self, client):
        gid = _create(client)["id"]
        # The first trial consumes a draw before the comparison fails.
        assert _draw(client, gid, kind="binomial", count=2, n=3, p="x").status_code == 422
        values = _draw(client, gid, count=3).json()["values"]
        local = SeededRNG("api", "pcg32")
        assert values == [local.random() for _ in range(3)]

    def test_collapsed_triangular_returns_the_point(self, client):
        gid = _create(client)["id"]
        resp = _draw(client, gid, kind="triangular", count=2, low=1, high=1, mode=1)
        assert resp.status_code == 200
        assert resp.json()["values"] == [1.0, 1.0]


# ---------------------------------------------------------------------------
# State, reset and fork
# ---------------------------------------------------------------------------

class TestStateEndpoints:
    def test_state_round_trip(self, client):
        gid = _create(client)["id"]
        _draw(client, gid, kind="normal", count=3)
        state = client.get(f"{API}/generators/{gid}/state").json()
        assert state["algorithm"] == "pcg32"
        assert state["normalCache"]["hasSpare"] is True

        expected = _draw(client, gid, kind="normal", count=4).json()["values"]
        resp = client.put(f"{API}/generators/{gid}/state", json=state)
        assert resp.status_code == 200
        assert _draw(client, gid, kind="normal", count=4).json()["values"] == expected

    def test_malformed_state_is_422(self, client):
        gid = _create(client)["id"]
        resp = client.put(f"{API}/generators/{gid}/state", json={"algorithm": "pcg32"})
        assert resp.status_code == 422

    def test_reset(self, client):
        gid = _create(client)["id"]
        first = _draw(client, gid, count=3).json()["values"]
        _draw(client, gid, count=10)
        assert client.post(f"{API}/generators/{gid}/reset").status_code == 200
        assert _draw(client, gid, count=3).json()["values"] == first

    def test_fingerprint_tracks_state(self, client):
        info = _create(client)
        after = _draw(client, info["id"], count=1).json()
        assert after["fingerprint"] != info["fingerprint"]

    def test_fork(self, client):
        gid = _create(client, algorithm="xoshiro")["id"]
        resp = client.post(f"{API}/generators/{gid}/fork", json={"label": "child"})
        assert resp.status_code == 201
        data = resp.json()
        child_id = data["child"]["id"]
        assert child_id != gid

        local = SeededRNG("api", "xoshiro128**").fork("child")
        values = _draw(client, child_id, count=3).json()["values"]
        assert values == [local.random() for _ in range(3)]

    def test_fork_without_body(self, client):
        gid = _create(client)["id"]
        resp = client.post(f"{API}/generators/{gid}/fork")
        assert resp.status_code == 201


# ---------------------------------------------------------------------------
# Noise
# ---------------------------------------------------------------------------

class TestNoiseEndpoint:
    def test_value_grid_matches_field(self, client):
        resp = client.get(f"{API}/noise/value", params={"seed": "n", "width": 4, "height": 3, "scale": 0.25, "octaves": 1})
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["values"]) == 3
        assert all(len(row) == 4 for row in data["values"])
        field = ValueNoise("n")
        assert data["values"][2][3] == field.noise_2d(3 * 0.25, 2 * 0.25)

    @pytest.mark.parametrize("kind", ["simplex", "perlin", "worley", "ridged", "billowed"])
    def test_every_kind(self, client, kind):
        resp = client.get(f"{API}/noise/{kind}", params={"width": 5, "height": 5, "octaves": 2})
        assert resp.status_code == 200
        assert resp.json()["kind"] == kind

    def test_fbm_and_slice(self, client):
        resp = client.get(f"{API}/noise/simplex", params={"octaves": 4, "z": 0.5, "width": 3, "height": 3})
        assert resp.status_code == 200
        assert all(abs(v) <= 1.05 for row in resp.json()["values"] for v in row)

    def test_octaves_default_to_config(self, client):
        data = client.get(f"{API}/noise/value", params={"seed": "n", "width": 2, "height": 2}).json()
        assert data["octaves"] == 4
        field = ValueNoise("n")
        assert data["values"][1][1] == pytest.approx(fbm(field, 0.1, 0.1, None, 4, 2.0, 0.5))

    def test_grid_limit(self, client):
        assert client.get(f"{API}/noise/value", params={"width": 33}).status_code == 422

    def test_unknown_kind(self, client):
        assert client.get(f"{API}/noise/plasma").status_code == 422
