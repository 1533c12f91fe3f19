# tests/test_bitgen.py

"""
Reference vectors for the raw bit-generators in bitgen/.
"""

from __future__ import annotations

import numpy as np

from bitgen.bits import mix64, rotl64, rotr32
from bitgen.chacha import ChaChaPlaceholder
from bitgen.mt19937 import N, MersenneTwister, init_genrand
from bitgen.pcg import Pcg32
from bitgen.xoshiro import Xoshiro256PlusPlus, expand_seed


# -------------------------------------------------------------------
# bits
# -------------------------------------------------------------------


def test_rotl64_wraps_high_bits():
    assert rotl64(1 << 63, 1) == 1
    assert rotl64(0x1, 23) == 1 << 23


def test_rotr32_handles_zero_rotation():
    assert rotr32(0xDEADBEEF, 0) == 0xDEADBEEF
    assert rotr32(1, 1) == 1 << 31


def test_mix64_matches_splitmix_finalizer():
    # splitmix64(0) == mix64(0 + golden gamma)
    assert mix64(0x9E3779B97F4A7C15) == 0xE220A8397B1DCDAF
    assert mix64(0) == 0


# -------------------------------------------------------------------
# xoshiro256++
# -------------------------------------------------------------------


def test_xoshiro_seed_expansion_seed_42():
    assert expand_seed(42) == [
        12058926934050108962,
        10946711343035318437,
        14786150710489903454,
        17399711335749928852,
    ]


def test_xoshiro_outputs_seed_42():
    x = Xoshiro256PlusPlus(42)
    assert [x.next() for _ in range(3)] == [
        6781574993340718895,
        8482410959394933207,
        16258229684993206582,
    ]


def test_xoshiro_adjacent_seeds_differ_in_every_word():
    a = expand_seed(1)
    b = expand_seed(2)
    assert all(x != y for x, y in zip(a, b))


def test_xoshiro_jump_vector_seed_42():
    x = Xoshiro256PlusPlus(42)
    x.jump()
    assert x.next() == 910903960255839852


# -------------------------------------------------------------------
# PCG32
# -------------------------------------------------------------------


def test_pcg32_outputs_seed_42():
    p = Pcg32(42)
    assert p.inc == 85
    assert [p.next() for _ in range(4)] == [0, 210066564, 2482336384, 3552788122]


def test_pcg32_increment_is_odd_for_large_seed():
    p = Pcg32(0xFFFFFFFFFFFFFFFF)
    assert p.inc & 1 == 1
    assert p.inc < 1 << 64


# -------------------------------------------------------------------
# MT19937
# -------------------------------------------------------------------


def test_mt19937_canonical_outputs_seed_5489():
    mt = MersenneTwister(5489)
    assert [mt.next() for _ in range(3)] == [3499211612, 581869302, 3890346734]


def test_mt19937_first_output_seed_42():
    assert MersenneTwister(42).next() == 1608637542


def test_mt19937_seed_expansion_matches_numpy_legacy_seeding():
    _, key, pos, *_ = np.random.RandomState(42).get_state()
    mt = MersenneTwister(42)
    assert mt.index == pos == N
    assert mt.mt == [int(k) for k in key]


def test_mt19937_uses_low_32_bits_of_seed():
    assert init_genrand((1 << 32) + 7) == init_genrand(7)


def test_mt19937_regenerates_after_624_draws():
    mt = MersenneTwister(1)
    for _ in range(N):
        mt.next()
    assert mt.index == N
    mt.next()
    assert mt.index == 1


# -------------------------------------------------------------------
# cipher-stream placeholder
# -------------------------------------------------------------------


def test_chacha_placeholder_words_from_seed_halves():
    c = ChaChaPlaceholder(0x1122334455667788)
    assert c.pos == 16
    assert c.words[0::2] == [0x55667788] * 8
    assert c.words[1::2] == [0x11223344] * 8


def test_chacha_placeholder_cycles_every_16_words():
    c = ChaChaPlaceholder(0xCAFEBABE12345678)
    first = [c.next() for _ in range(16)]
    second = [c.next() for _ in range(16)]
    assert first == second
