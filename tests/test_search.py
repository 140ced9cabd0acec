from types import SimpleNamespace
import pytest
from fitz.ai.policy import find_policy_a, find_policy_b, play_automated
from fitz.ai.scan import anchor_cycle, has_legal_move, scan
from fitz.board import Board, Player, PlayerKind
from fitz.errors import SearchExhausted
from fitz.placement import is_legal
from fitz.tiles import OFFSET, ROTATIONS, Rotation
from helpers import CENTER, ELL, PLUS, RIGHT_OF_CENTER, catalog


def make_game(h, w, *shapes, p1=PlayerKind.POLICY_A, p2=PlayerKind.POLICY_B):
    b = Board()
    b.resize(h, w)
    players = (Player("*", p1, first=True), Player("#", p2, first=False))
    return SimpleNamespace(board=b, tiles=catalog(*shapes), players=players, last_move=None)


def test_anchor_cycle_visits_every_anchor_once():
    b = Board()
    b.resize(3, 4)
    for descending in (False, True):
        seen = list(anchor_cycle(b, (1, 1), descending))
        assert len(seen) == len(set(seen)) == (3 + 2 * OFFSET) * (4 + 2 * OFFSET)
        assert seen[0] == (1, 1)


def test_ascending_and_descending_wrap():
    b = Board()
    b.resize(2, 2)
    up = list(anchor_cycle(b, (3, 2)))
    assert up[:3] == [(3, 2), (3, 3), (-2, -2)]
    down = list(anchor_cycle(b, (-2, -1), descending=True))
    assert down[:3] == [(-2, -1), (-2, -2), (3, 3)]


def test_scan_nesting_orders():
    b = Board()
    b.resize(1, 1)
    major = list(scan(b, (-2, -2), rotation_major=True))
    minor = list(scan(b, (-2, -2)))
    assert major[:2] == [(-2, -2, Rotation.R0), (-2, -1, Rotation.R0)]
    assert minor[:2] == [(-2, -2, Rotation.R0), (-2, -2, Rotation.R90)]
    assert sorted(major) == sorted(minor)


def test_policy_a_first_move_is_top_left_cell():
    g = make_game(3, 3, CENTER)
    p1 = g.players[0]
    assert play_automated(g, p1) == (0, 0, Rotation.R0)
    assert g.board.owner_at(0, 0) is p1
    g.tiles.advance()
    assert g.tiles.active == 0


def test_policy_a_resumes_from_last_move_of_either_player():
    g = make_game(3, 3, CENTER)
    g.last_move = (1, 1)
    assert find_policy_a(g) == (1, 1, Rotation.R0)
    g.board.place(1, 1, g.players[1])
    assert find_policy_a(g) == (1, 2, Rotation.R0)


def test_policy_a_is_rotation_major_policy_b_is_anchor_major():
    g = make_game(3, 3, RIGHT_OF_CENTER)
    assert find_policy_a(g) == (0, -1, Rotation.R0)
    assert find_policy_b(g, g.players[0]) == (-1, 0, Rotation.R90)


def test_policy_b_second_player_scans_from_bottom_right():
    g = make_game(3, 3, CENTER)
    assert find_policy_b(g, g.players[1]) == (2, 2, Rotation.R0)
    g = make_game(3, 3, RIGHT_OF_CENTER)
    assert find_policy_b(g, g.players[1]) == (3, 2, Rotation.R270)


def test_policy_b_resumes_from_own_last_move():
    g = make_game(3, 3, CENTER)
    p2 = g.players[1]
    g.board.place(2, 2, p2)
    p2.last_move = (2, 2)
    g.last_move = (0, 0)
    assert find_policy_b(g, p2) == (2, 1, Rotation.R0)


def test_probe_true_iff_some_combination_is_legal():
    g = make_game(3, 3, PLUS)
    p = g.players[0]

    def brute_force():
        for rot in ROTATIONS:
            m = g.tiles.active_mask(rot)
            for r in range(-OFFSET, 3 + OFFSET):
                for c in range(-OFFSET, 3 + OFFSET):
                    if is_legal(r, c, rot, g.board, m):
                        return True
        return False

    assert brute_force()
    assert has_legal_move(g.board, g.tiles, p)
    g.board.place(1, 1, p)
    assert not brute_force()
    assert not has_legal_move(g.board, g.tiles, p)


def test_probe_uses_ascending_scan_for_second_player():
    g = make_game(3, 3, CENTER)
    p2 = g.players[1]
    for r in range(3):
        for c in range(3):
            if (r, c) != (0, 0):
                g.board.place(r, c, p2)
    assert has_legal_move(g.board, g.tiles, p2)
    p2.last_move = (2, 2)
    assert has_legal_move(g.board, g.tiles, p2)


def test_probe_does_not_mutate():
    g = make_game(4, 4, ELL)
    before = [row[:] for row in g.board.grid]
    has_legal_move(g.board, g.tiles, g.players[0])
    assert g.board.grid == before
    assert g.players[0].last_move is None
    assert g.last_move is None


def test_exhausted_policy_raises():
    g = make_game(1, 1, PLUS)
    with pytest.raises(SearchExhausted):
        play_automated(g, g.players[0])
    assert g.board.owner_at(0, 0) is None


def test_human_player_has_no_policy():
    g = make_game(3, 3, CENTER, p1=PlayerKind.HUMAN)
    with pytest.raises(ValueError):
        play_automated(g, g.players[0])


def test_policy_b_second_player_start_on_tall_board():
    # start row comes from the width, so on a tall board the scan begins mid-board
    g = make_game(10, 3, CENTER)
    assert find_policy_b(g, g.players[1]) == (5, 2, Rotation.R0)


def test_policy_b_second_player_start_on_wide_board():
    g = make_game(3, 10, CENTER)
    assert find_policy_b(g, g.players[1]) == (2, 9, Rotation.R0)


def test_anchor_cycle_steps_out_of_range_start_into_range():
    b = Board()
    b.resize(10, 3)
    seen = list(anchor_cycle(b, (5, 12), descending=True))
    assert seen[:3] == [(5, 4), (5, 3), (5, 2)]
    assert len(set(seen)) == (10 + 2 * OFFSET) * (3 + 2 * OFFSET)
