"""Tests for the six bit-generators: known answers, state round-trips, reset, clone."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from seedforge.core.enums import Algorithm, resolve_algorithm
from seedforge.core.errors import ConfigurationError
from seedforge.core.hashing import string_to_seed
from seedforge.core.state import (
    LcgState,
    Mulberry32State,
    Sfc32State,
    Xorshift128State,
    Xoshiro128State,
)
from seedforge.generators import GENERATORS, create_generator, generator_from_state
from seedforge.generators.lcg import Lcg
from seedforge.generators.mulberry32 import Mulberry32
from seedforge.generators.pcg32 import Pcg32
from seedforge.generators.sfc32 import Sfc32
from seedforge.generators.xorshift128 import Xorshift128
from seedforge.generators.xoshiro128 import Xoshiro128

ALL_ALGORITHMS = list(Algorithm)


def _draws(gen, n):
    return [gen.next_uint32() for _ in range(n)]


# ---------------------------------------------------------------------------
# Registry and aliases
# ---------------------------------------------------------------------------

class TestRegistry:
    def test_every_algorithm_registered(self):
        assert set(GENERATORS) == set(Algorithm)

    @pytest.mark.parametrize("key,expected", [
        ("XOSHIRO", Algorithm.XOSHIRO128SS),
        ("xoshiro128", Algorithm.XOSHIRO128SS),
        ("Mulberry", Algorithm.MULBERRY32),
        ("xorshift128+", Algorithm.XORSHIFT128PLUS),
        ("pcg", Algorithm.PCG32),
        ("sfc", Algorithm.SFC32),
        (" lcg ", Algorithm.LCG),
    ])
    def test_aliases_case_insensitive(self, key, expected):
        assert resolve_algorithm(key) is expected

    def test_unknown_algorithm_raises(self):
        with pytest.raises(ConfigurationError, match="Unknown algorithm"):
            create_generator("mersenne", 1)

    def test_create_generator_type(self):
        assert isinstance(create_generator("pcg32", 7), Pcg32)

    def test_bad_seed_type_raises(self):
        with pytest.raises(ConfigurationError):
            create_generator("xoshiro", [1, 2])
        with pytest.raises(ConfigurationError):
            create_generator("xoshiro", 1.5)

    def test_integral_float_seed_is_int(self):
        a = create_generator("mulberry32", 42.0)
        b = create_generator("mulberry32", 42)
        assert _draws(a, 5) == _draws(b, 5)


# ---------------------------------------------------------------------------
# Known answers
# ---------------------------------------------------------------------------

class TestKnownAnswers:
    def test_xoshiro128_from_state(self):
        gen = Xoshiro128.from_state(Xoshiro128State(s=(1, 2, 3, 4), original_seed=0))
        assert _draws(gen, 3) == [11520, 0, 5927040]

    def test_xorshift128_from_state(self):
        gen = Xorshift128.from_state(Xorshift128State(s=(1, 2, 3, 4), original_seed=0))
        assert gen.next_uint32() == 8229

    def test_sfc32_from_state(self):
        gen = Sfc32.from_state(Sfc32State(a=1, b=2, c=3, counter=4, original_seed=0))
        assert _draws(gen, 2) == [7, 34]

    def test_lcg_numerical_recipes_sequence(self):
        gen = Lcg(0)
        assert _draws(gen, 2) == [1013904223, 1196435762]

    def test_pcg32_reference_stream(self):
        # pcg32-demo: pcg32_srandom_r(&rng, 42u, 54u)
        gen = Pcg32(42, sequence=54)
        assert _draws(gen, 6) == [
            0xA15C02B7, 0x7B47F409, 0xBA1D3330, 0x83D2F293, 0xBFA4784B, 0xCBED606E,
        ]

    def test_mulberry32_string_seed(self):
        gen = create_generator("mulberry32", "test-seed")
        assert _draws(gen, 5) == [6047562, 3825663820, 2925113296, 3815665328, 2445257224]

    def test_xoshiro128_string_seed(self):
        gen = create_generator("xoshiro128**", "test-seed")
        assert _draws(gen, 5) == [2042339317, 448302074, 1711731193, 2592527937, 2005314935]

    def test_xorshift128_integer_seed(self):
        gen = create_generator("xorshift128+", 12345)
        assert _draws(gen, 2) == [31777713, 1393101523]

    def test_sfc32_integer_seed(self):
        assert create_generator("sfc32", 12345).next_uint32() == 2775721871

    def test_lcg_float_uses_modulus(self):
        gen = Lcg(0, a=1, c=1, m=10)
        assert gen.next_float() == pytest.approx(0.1)

    def test_lcg_rejects_bad_parameters(self):
        with pytest.raises(ConfigurationError):
            Lcg(0, m=0)


# ---------------------------------------------------------------------------
# Contract shared by all generators
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("algorithm", ALL_ALGORITHMS, ids=lambda a: a.value)
class TestContract:
    def test_same_seed_same_sequence(self, algorithm):
        a = create_generator(algorithm, "alpha")
        b = create_generator(algorithm, "alpha")
        assert _draws(a, 50) == _draws(b, 50)

    def test_different_seeds_diverge(self, algorithm):
        a = create_generator(algorithm, "alpha")
        b = create_generator(algorithm, "beta")
        assert _draws(a, 10) != _draws(b, 10)

    def test_outputs_are_uint32(self, algorithm):
        gen = create_generator(algorithm, 99)
        assert all(0 <= v < 2**32 for v in _draws(gen, 200))

    def test_floats_in_unit_interval(self, algorithm):
        gen = create_generator(algorithm, 99)
        assert all(0.0 <= gen.next_float() < 1.0 for _ in range(200))

    def test_state_round_trip(self, algorithm):
        gen = create_generator(algorithm, "round-trip")
        _draws(gen, 17)
        saved = gen.get_state()
        expected = _draws(gen, 25)
        gen.set_state(saved)
        assert _draws(gen, 25) == expected

    def test_payload_round_trip(self, algorithm):
        gen = create_generator(algorithm, "payload")
        _draws(gen, 3)
        payload = gen.get_state().to_payload()
        expected = _draws(gen, 10)
        restored = generator_from_state(algorithm, payload)
        assert _draws(restored, 10) == expected

    def test_snapshot_does_not_alias(self, algorithm):
        gen = create_generator(algorithm, "alias")
        saved = gen.get_state()
        _draws(gen, 5)
        assert gen.get_state() != saved

    def test_reset_restores_initial_sequence(self, algorithm):
        gen = create_generator(algorithm, "reset")
        first = _draws(gen, 30)
        _draws(gen, 100)
        gen.reset()
        assert _draws(gen, 30) == first

    def test_clone_is_independent(self, algorithm):
        gen = create_generator(algorithm, "clone")
        _draws(gen, 4)
        twin = gen.clone()
        assert _draws(twin, 10) == _draws(gen, 10)
        gen.next_uint32()
        assert twin.get_state() != gen.get_state()

    def test_mismatched_state_rejected(self, algorithm):
        other = Algorithm.LCG if algorithm is not Algorithm.LCG else Algorithm.MULBERRY32
        foreign = create_generator(other, 1).get_state()
        gen = create_generator(algorithm, 1)
        with pytest.raises(ConfigurationError):
            gen.set_state(foreign)


# ---------------------------------------------------------------------------
# Algorithm-specific behaviour
# ---------------------------------------------------------------------------

class TestSpecifics:
    def test_mulberry_string_seed_hashes(self):
        state = Mulberry32("abc").get_state()
        assert state.seed == string_to_seed("abc")
        assert state.state == state.seed

    def test_signed_words_fold_to_unsigned(self):
        state = Sfc32State.model_validate(
            {"a": -1, "b": 2, "c": 3, "counter": 4, "originalSeed": "x"}
        )
        assert state.a == 0xFFFFFFFF

    def test_pcg_state_split_into_halves(self):
        gen = Pcg32(42, sequence=54)
        state = gen.get_state()
        assert state.inc_lo == ((54 << 1) | 1)
        assert state.inc_hi == 0
        assert state.original_sequence == 54

    def test_pcg_sequences_differ(self):
        a = Pcg32(42, sequence=1)
        b = Pcg32(42, sequence=2)
        assert _draws(a, 5) != _draws(b, 5)

    def test_lcg_state_keeps_parameters(self):
        gen = Lcg(5, a=3, c=1, m=1000)
        gen.next_uint32()
        clone = Lcg.from_state(gen.get_state())
        assert clone.get_state() == LcgState(state=16, seed=5, a=3, c=1, m=1000)

    def test_xoshiro_jump_changes_stream(self):
        a = Xoshiro128("jump")
        b = Xoshiro128("jump")
        b.jump()
        assert _draws(a, 5) != _draws(b, 5)

    def test_xoshiro_jump_deterministic(self):
        a = Xoshiro128("jump")
        b = Xoshiro128("jump")
        a.jump()
        b.jump()
        assert _draws(a, 5) == _draws(b, 5)

    def test_malformed_dict_state_raises(self):
        with pytest.raises(ConfigurationError, match="Malformed"):
            Xoshiro128.from_state({"s": [1, 2, 3], "originalSeed": 1})
