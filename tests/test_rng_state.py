"""Tests for the SeededRNG facade: determinism, reset, state transfer, clone and fork."""

import json

import pytest

from seedforge import create
from seedforge.core.enums import Algorithm
from seedforge.core.errors import ConfigurationError
from seedforge.core.state import ForgeState
from seedforge.systems.rng import SeededRNG

ALL_ALGORITHMS = list(Algorithm)


def _mixed_draws(rng: SeededRNG, n: int) -> list:
    """A fixed interleaving of draw kinds, including cached normals."""
    out = []
    for i in range(n):
        out.append(rng.random())
        out.append(rng.integer(-10, 10))
        out.append(rng.normal())
        if i % 3 == 0:
            out.append(rng.normal(5, 2))
    return out


# ---------------------------------------------------------------------------
# Determinism
# ---------------------------------------------------------------------------

class TestDeterminism:
    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS, ids=lambda a: a.value)
    def test_same_seed_same_draws(self, algorithm):
        a = SeededRNG("determinism", algorithm)
        b = SeededRNG("determinism", algorithm)
        assert _mixed_draws(a, 40) == _mixed_draws(b, 40)

    def test_default_algorithm_is_xoshiro(self):
        assert SeededRNG(1).algorithm is Algorithm.XOSHIRO128SS

    def test_create_shorthand(self):
        assert create("x", "pcg").algorithm is Algorithm.PCG32
        assert create("x").random() == SeededRNG("x").random()

    def test_random_in_unit_interval(self):
        rng = SeededRNG("test-seed")
        assert all(0.0 <= rng.random() < 1.0 for _ in range(1000))

    def test_integer_inclusive_bounds(self):
        rng = SeededRNG("bounds")
        values = [rng.integer(5, 15) for _ in range(1000)]
        assert all(isinstance(v, int) and 5 <= v <= 15 for v in values)
        assert min(values) == 5
        assert max(values) == 15

    def test_integer_rounds_bounds_inward(self):
        rng = SeededRNG("bounds")
        assert all(2 <= rng.integer(1.5, 3.5) <= 3 for _ in range(200))

    def test_uniform_range(self):
        rng = SeededRNG("uniform")
        assert all(-2.0 <= rng.uniform(-2.0, 3.0) < 3.0 for _ in range(500))

    def test_boolean_and_sign(self):
        rng = SeededRNG("coin")
        assert all(rng.boolean(1.0) for _ in range(50))
        assert not any(rng.boolean(0.0) for _ in range(50))
        assert {rng.sign() for _ in range(200)} == {-1, 1}

    def test_random_int_is_raw_uint32(self):
        rng = SeededRNG("raw")
        assert all(0 <= rng.random_int() < 2**32 for _ in range(100))


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------

class TestReset:
    def test_reset_replays_sequence(self):
        rng = SeededRNG("test-seed", "xoshiro128**")
        first = [rng.random() for _ in range(1000)]
        rng.reset()
        second = [rng.random() for _ in range(1000)]
        assert first == second
        assert all(0.0 <= v < 1.0 for v in first)

    def test_reset_clears_normal_cache(self):
        rng = SeededRNG("cache")
        first = rng.normal()
        rng.normal()
        rng.normal()
        rng.reset()
        assert rng.normal() == first

    def test_reset_ignores_set_seed(self):
        rng = SeededRNG("original")
        first = rng.random()
        rng.set_seed("other")
        assert rng.random() != first
        rng.reset()
        assert rng.random() == first

    def test_set_seed_keeps_algorithm(self):
        rng = SeededRNG("a", "sfc32")
        rng.set_seed("b")
        assert rng.algorithm is Algorithm.SFC32
        assert rng.random() == SeededRNG("b", "sfc32").random()

    def test_set_seed_can_switch_algorithm(self):
        rng = SeededRNG("a")
        rng.set_seed("a", "mulberry")
        assert rng.algorithm is Algorithm.MULBERRY32

    def test_reset_after_set_state_uses_restored_seed(self):
        source = SeededRNG("source")
        for _ in range(10):
            source.random()
        rng = SeededRNG("target")
        rng.set_state(source.get_state())
        rng.reset()
        assert rng.random() == SeededRNG("source").random()


# ---------------------------------------------------------------------------
# State round-trip
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("algorithm", ALL_ALGORITHMS, ids=lambda a: a.value)
class TestStateRoundTrip:
    def test_get_then_set_state(self, algorithm):
        rng = SeededRNG("round-trip", algorithm)
        _mixed_draws(rng, 7)
        saved = rng.get_state()
        expected = _mixed_draws(rng, 20)
        rng.set_state(saved)
        assert _mixed_draws(rng, 20) == expected

    def test_normal_cache_resumes(self, algorithm):
        rng = SeededRNG("normal-cache", algorithm)
        rng.normal()
        saved = rng.get_state()
        assert saved.normal_cache.has_spare
        would_have_been = rng.normal()
        rng.set_state(saved)
        assert rng.normal() == would_have_been

    def test_restore_into_fresh_instance_from_json(self, algorithm):
        rng = SeededRNG("json", algorithm)
        rng.normal()
        text = rng.get_state().to_json()
        expected = _mixed_draws(rng, 10)
        restored = SeededRNG.from_state(json.loads(text))
        assert restored.algorithm is algorithm
        assert _mixed_draws(restored, 10) == expected


class TestStatePayload:
    def test_payload_shape(self):
        payload = SeededRNG("shape").get_state().to_payload()
        assert set(payload) == {"algorithm", "generatorState", "normalCache"}
        assert payload["algorithm"] == "xoshiro128**"
        assert set(payload["generatorState"]) == {"s", "originalSeed"}
        assert payload["generatorState"]["originalSeed"] == "shape"
        assert payload["normalCache"] == {"spare": None, "hasSpare": False}

    def test_pcg_payload_keys(self):
        payload = SeededRNG(7, "pcg32").get_state().to_payload()
        assert set(payload["generatorState"]) == {
            "stateHi", "stateLo", "incHi", "incLo", "originalSeed", "originalSequence",
        }

    def test_json_round_trip_and_fingerprint(self):
        rng = SeededRNG("fp")
        state = rng.get_state()
        again = ForgeState.from_json(state.to_json())
        assert again == state
        assert again.fingerprint() == state.fingerprint()
        rng.random()
        assert rng.get_state().fingerprint() != state.fingerprint()

    def test_set_state_switches_algorithm(self):
        rng = SeededRNG("x")
        rng.set_state(SeededRNG("y", "lcg").get_state())
        assert rng.algorithm is Algorithm.LCG

    def test_snapshot_is_frozen(self):
        state = SeededRNG("frozen").get_state()
        with pytest.raises(Exception):
            state.algorithm = Algorithm.LCG

    @pytest.mark.parametrize("payload", [
        "not a mapping",
        {"generatorState": {}},
        {"algorithm": "xoshiro128**"},
        {"algorithm": "bogus", "generatorState": {}},
        {"algorithm": "xoshiro128**", "generatorState": {"s": [1, 2], "originalSeed": 1}},
        {"algorithm": "lcg", "generatorState": {"state": 1, "seed": 1, "a": 0, "c": 1, "m": 10}},
        {
            "algorithm": "mulberry32",
            "generatorState": {"state": 1, "seed": 1},
            "normalCache": {"spare": None, "hasSpare": True},
        },
    ])
    def test_malformed_payload_rejected(self, payload):
        rng = SeededRNG("bad")
        with pytest.raises(ConfigurationError):
            rng.set_state(payload)

    def test_invalid_json_rejected(self):
        with pytest.raises(ConfigurationError):
            ForgeState.from_json("{not json")


# ---------------------------------------------------------------------------
# Clone and fork
# ---------------------------------------------------------------------------

class TestCloneAndFork:
    def test_clone_matches_then_diverges(self):
        rng = SeededRNG("clone")
        rng.normal()
        twin = rng.clone()
        assert _mixed_draws(twin, 15) == _mixed_draws(rng, 15)
        rng.random()
        assert twin.random() != rng.random()

    def test_clone_keeps_reset_origin(self):
        rng = SeededRNG("origin")
        first = rng.random()
        twin = rng.clone()
        twin.reset()
        assert twin.random() == first

    def test_fork_is_deterministic(self):
        a = SeededRNG("parent").fork("child")
        b = SeededRNG("parent").fork("child")
        assert _mixed_draws(a, 10) == _mixed_draws(b, 10)

    def test_fork_consumes_one_parent_draw(self):
        parent = SeededRNG("parent")
        reference = SeededRNG("parent")
        parent.fork("x")
        reference.random_int()
        assert parent.random_int() == reference.random_int()

    def test_fork_derivation_string(self):
        reference = SeededRNG("parent", "sfc32")
        raw = reference.random_int()
        child = SeededRNG("parent", "sfc32").fork("lbl")
        expected = SeededRNG(f"sfc32_{raw}_lbl", "sfc32")
        assert child.algorithm is Algorithm.SFC32
        assert child.random() == expected.random()

    def test_fork_known_answer(self):
        assert SeededRNG("parent", "sfc32").fork("lbl").random_int() == 2213723809

    def test_fork_labels_separate_streams(self):
        a = SeededRNG("parent").fork("a")
        b = SeededRNG("parent").fork("b")
        assert a.random() != b.random()


class TestJump:
    def test_jump_on_xoshiro(self):
        rng = SeededRNG("jump")
        plain = SeededRNG("jump")
        rng.jump()
        assert rng.random() != plain.random()

    @pytest.mark.parametrize("algorithm", ["mulberry32", "pcg32", "lcg"])
    def test_jump_unsupported(self, algorithm):
        with pytest.raises(ConfigurationError, match="jump"):
            SeededRNG("jump", algorithm).jump()
