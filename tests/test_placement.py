from types import SimpleNamespace
from fitz.board import Board, Player, PlayerKind
from fitz.placement import commit, footprint, is_legal
from fitz.tiles import MASK_DIM, OFFSET, ROTATIONS, Rotation
from helpers import CENTER, ELL, PLUS, RIGHT_OF_CENTER, catalog, mask


def board(h, w):
    b = Board()
    b.resize(h, w)
    return b


def test_anchor_off_board_is_legal_when_filled_cells_land_inside():
    b = board(3, 3)
    m = mask(RIGHT_OF_CENTER)
    assert is_legal(0, -1, Rotation.R0, b, m)
    assert not is_legal(0, -2, Rotation.R0, b, m)
    assert not is_legal(0, 2, Rotation.R0, b, m)


def test_occupied_filled_cell_is_illegal():
    b = board(5, 5)
    p = Player("*", PlayerKind.HUMAN, first=True)
    b.place(1, 2, p)
    m = mask(PLUS)
    assert not is_legal(2, 2, Rotation.R0, b, m)
    assert is_legal(3, 2, Rotation.R0, b, m)


def test_unfilled_cells_never_affect_legality():
    p = Player("#", PlayerKind.HUMAN, first=False)
    b = board(3, 3)
    for r in range(3):
        for c in range(3):
            if (r, c) != (1, 1):
                b.place(r, c, p)
    m = mask(CENTER)
    assert is_legal(1, 1, Rotation.R0, b, m)
    # the unfilled cells of a corner anchor hang off two edges
    assert is_legal(0, 0, Rotation.R0, board(1, 1), m)


def test_legality_matches_filled_footprint_everywhere():
    p = Player("*", PlayerKind.HUMAN, first=True)
    b = board(4, 6)
    b.place(0, 0, p)
    b.place(2, 3, p)
    b.place(3, 5, p)
    cat = catalog(ELL)
    for rot in ROTATIONS:
        m = cat.active_mask(rot)
        for r in range(-OFFSET, 4 + OFFSET):
            for c in range(-OFFSET, 6 + OFFSET):
                expected = all(b.in_bounds(y, x) and b.owner_at(y, x) is None
                               for y, x in footprint(r, c, m))
                assert is_legal(r, c, rot, b, m) == expected


def test_commit_stamps_only_footprint_and_records_last_move():
    b = board(5, 5)
    p = Player("*", PlayerKind.POLICY_A, first=True)
    game = SimpleNamespace(last_move=None)
    m = mask(PLUS)
    before = [row[:] for row in b.grid]
    commit(2, 2, Rotation.R0, b, m, p, game)
    cells = set(footprint(2, 2, m))
    assert cells == {(1, 2), (2, 1), (2, 2), (2, 3), (3, 2)}
    for r in range(5):
        for c in range(5):
            if (r, c) in cells:
                assert b.owner_at(r, c) is p
            else:
                assert b.owner_at(r, c) is before[r][c]
    assert p.last_move == (2, 2)
    assert game.last_move == (2, 2)


def test_footprint_size_matches_filled_cells():
    m = mask(ELL)
    filled = sum(m[r][c] for r in range(MASK_DIM) for c in range(MASK_DIM))
    assert len(list(footprint(0, 0, m))) == filled


def test_resize_discards_existing_pieces():
    b = board(3, 3)
    p = Player("*", PlayerKind.HUMAN, first=True)
    b.place(0, 0, p)
    b.place(2, 2, p)
    b.resize(3, 3)
    assert b.occupied_count() == 0
    b.place(1, 1, p)
    b.resize(4, 5)
    assert (b.height, b.width) == (4, 5)
    assert b.occupied_count() == 0
    assert all(b.owner_at(r, c) is None for r in range(4) for c in range(5))
