import io

import pytest

from pushswap.stacks import PushSwap


def make(values):
    out = io.StringIO()
    return PushSwap(values, out), out


def test_initial_state():
    values = [4, 8, 15]
    game, out = make(values)
    assert list(game.a) == values
    assert list(game.b) == []
    assert out.getvalue() == ""


def test_sa_swaps_top_two():
    values = [7, 3, 9, 1]
    game, out = make(values)
    assert game.sa() is True
    assert list(game.a) == [values[1], values[0]] + values[2:]
    assert out.getvalue() == "sa\n"


def test_sa_twice_restores():
    values = [7, 3, 9]
    game, _ = make(values)
    game.sa()
    game.sa()
    assert list(game.a) == values


@pytest.mark.parametrize("values", [[], [5]])
def test_sa_needs_two_elements(values):
    game, out = make(values)
    assert game.sa() is False
    assert list(game.a) == values
    assert out.getvalue() == ""


def test_sb_swaps_b():
    values = [1, 2, 3]
    game, out = make(values)
    game.pb()
    game.pb()
    b_before = list(game.b)
    assert game.sb() is True
    assert list(game.b) == b_before[::-1]
    assert out.getvalue() == "pb\npb\nsb\n"


def test_pb_then_pa_restores():
    values = [6, 2, 8]
    game, out = make(values)
    assert game.pb() is True
    assert list(game.b) == values[:1]
    assert list(game.a) == values[1:]
    assert game.pa() is True
    assert list(game.a) == values
    assert list(game.b) == []
    assert out.getvalue() == "pb\npa\n"


def test_push_from_empty_does_nothing():
    game, out = make([1, 2])
    assert game.pa() is False
    assert list(game.a) == [1, 2]
    game2, out2 = make([])
    assert game2.pb() is False
    assert out.getvalue() == "" and out2.getvalue() == ""


def test_ra_moves_top_to_bottom():
    values = [10, 20, 30, 40]
    game, out = make(values)
    assert game.ra() is True
    assert list(game.a) == values[1:] + values[:1]
    assert out.getvalue() == "ra\n"


def test_rra_moves_bottom_to_top():
    values = [10, 20, 30, 40]
    game, out = make(values)
    assert game.rra() is True
    assert list(game.a) == values[-1:] + values[:-1]
    assert out.getvalue() == "rra\n"


def test_ra_then_rra_restores():
    values = [3, 1, 4, 1, 5]
    game, _ = make(values)
    game.ra()
    game.rra()
    assert list(game.a) == values


def test_full_rotation_restores():
    values = [9, 8, 7, 6]
    game, _ = make(values)
    for _ in values:
        game.ra()
    assert list(game.a) == values


@pytest.mark.parametrize("method", ["ra", "rra", "rb", "rrb"])
def test_rotations_need_two_elements(method):
    game, out = make([1])
    game.b.append(2)
    assert getattr(game, method)() is False
    assert out.getvalue() == ""


def test_ss_swaps_both():
    game, out = make([1, 2, 3, 4])
    game.pb()
    game.pb()
    a_before, b_before = list(game.a), list(game.b)
    assert game.ss() is True
    assert list(game.a) == a_before[:2][::-1] + a_before[2:]
    assert list(game.b) == b_before[::-1]
    assert out.getvalue().endswith("ss\n")


def test_ss_partial_when_b_too_short():
    values = [1, 2, 3]
    game, out = make(values)
    assert game.ss() is False
    # a was swapped before b was found too short; nothing is written
    assert list(game.a) == [values[1], values[0], values[2]]
    assert out.getvalue() == ""


def test_ss_untouched_when_a_too_short():
    game, out = make([1])
    game.b.extend([2, 3])
    assert game.ss() is False
    assert list(game.b) == [2, 3]
    assert out.getvalue() == ""


def test_rr_and_rrr_cancel():
    game, out = make([1, 2, 3, 4, 5])
    game.pb()
    game.pb()
    a_before, b_before = list(game.a), list(game.b)
    assert game.rr() is True
    assert game.rrr() is True
    assert list(game.a) == a_before
    assert list(game.b) == b_before
    assert out.getvalue() == "pb\npb\nrr\nrrr\n"


def test_rr_partial_when_b_too_short():
    values = [1, 2, 3]
    game, out = make(values)
    assert game.rr() is False
    assert list(game.a) == values[1:] + values[:1]
    assert out.getvalue() == ""


def test_elements_are_conserved():
    values = [5, 3, 8, 1, 9]
    game, _ = make(values)
    for name in ["pb", "pb", "ss", "rr", "pa", "rrr", "sa", "pb"]:
        getattr(game, name)()
    assert sorted(list(game.a) + list(game.b)) == sorted(values)


def test_writes_to_stdout_by_default(capsys):
    game = PushSwap([2, 1])
    game.sa()
    assert capsys.readouterr().out == "sa\n"