import random
from palmon.battle.capture import (attempt_capture, capture_chance, capture_eligible,
                                   captured_hp, escape_success)


def test_eligibility_is_strictly_below_seventy_percent():
    assert not capture_eligible(7, 10)
    assert not capture_eligible(14, 20)
    assert capture_eligible(13, 20)
    assert capture_eligible(0, 20)
    assert not capture_eligible(20, 20)


def test_capture_chance_bounds():
    assert capture_chance(20, 20) == 0.0
    assert capture_chance(0, 20) == 0.8
    assert abs(capture_chance(10, 20) - 0.4) < 1e-9


def test_full_hp_never_captures(scripted_rng):
    rng = scripted_rng(randoms=[0.0])
    res = attempt_capture(rng, 18, 18)
    assert res.chance == 0.0
    assert not res.success


def test_fainted_target_is_not_guaranteed(scripted_rng):
    res = attempt_capture(scripted_rng(randoms=[0.8]), 0, 20)
    assert not res.success
    res = attempt_capture(scripted_rng(randoms=[0.79]), 0, 20)
    assert res.success


def test_captured_hp_is_half_and_never_zero():
    assert captured_hp(22) == 11
    assert captured_hp(25) == 12
    assert captured_hp(1) == 1


def test_escape_is_a_coin_flip(scripted_rng):
    assert escape_success(scripted_rng(randoms=[0.49]))
    assert not escape_success(scripted_rng(randoms=[0.5]))
    rng = random.Random(9)
    wins = sum(escape_success(rng) for _ in range(2000))
    assert 850 <= wins <= 1150
