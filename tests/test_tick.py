import numpy as np
import pytest

from life import Block, CellState, Table, next_state


def _table_with(size, cells):
    table = Table.new(size)
    for x, y in cells:
        table.set(x, y, CellState.ALIVE)
    return table


def _reference_step(board):
    """Cell-by-cell B3/S23 step on a plain (H, W) array, wrapping both axes."""
    height, width = board.shape
    out = np.zeros_like(board)
    for y in range(height):
        for x in range(width):
            count = 0
            for dy in (-1, 0, 1):
                for dx in (-1, 0, 1):
                    if dx == 0 and dy == 0:
                        continue
                    count += int(board[(y + dy) % height, (x + dx) % width])
            if board[y, x]:
                out[y, x] = 1 if count in (2, 3) else 0
            else:
                out[y, x] = 1 if count == 3 else 0
    return out


def test_neighbor_counts_wrap_around():
    table = _table_with(5, [(0, 0), (4, 4)])
    counts = table.neighbor_counts()
    assert counts.shape == (5, 5)
    # counts are indexed [y, x]
    assert counts[1, 1] == 1
    assert counts[1, 0] == 1  # wrapped column
    assert counts[0, 1] == 1  # wrapped row
    assert counts[3, 3] == 1  # diagonal toward (4, 4)
    assert counts[0, 0] == 1  # (4, 4) is a diagonal neighbor across both edges
    assert counts[2, 2] == 0
    assert counts[2, 0] == 0
    # every live cell contributes to exactly eight neighbors
    assert int(counts.sum()) == 16


def test_blocks_pair_state_with_count():
    table = _table_with(5, [(0, 0), (4, 4)])
    blocks = table.blocks()
    assert len(blocks) == 25
    assert blocks[0] == Block(CellState.ALIVE, 1)
    assert blocks[1 * 5 + 1] == Block(CellState.DEAD, 1)
    assert blocks[2 * 5 + 2] == Block(CellState.DEAD, 0)


@pytest.mark.parametrize("count", range(9))
def test_rule_table(count):
    alive = next_state(Block(CellState.ALIVE, count))
    dead = next_state(Block(CellState.DEAD, count))
    assert alive is (CellState.ALIVE if count in (2, 3) else CellState.DEAD)
    assert dead is (CellState.ALIVE if count == 3 else CellState.DEAD)


def test_block_is_still_life():
    table = _table_with(6, [(2, 2), (3, 2), (2, 3), (3, 3)])
    before = table.copy()
    table.tick()
    assert table == before


def test_vertical_line_spreads_to_wrapped_columns():
    table = _table_with(5, [(0, y) for y in range(5)])
    table.tick()
    # each line cell keeps its two vertical neighbors and survives;
    # both wrapped side columns see three and are born
    for y in range(5):
        assert table.get(4, y) is CellState.ALIVE
        assert table.get(0, y) is CellState.ALIVE
        assert table.get(1, y) is CellState.ALIVE
        assert table.get(2, y) is CellState.DEAD
        assert table.get(3, y) is CellState.DEAD


def test_full_band_collapses_to_far_column():
    table = _table_with(5, [(x, y) for x in (4, 0, 1) for y in range(5)])
    table.tick()
    alive = {(x, y) for x in range(5) for y in range(5) if table.get(x, y) is CellState.ALIVE}
    assert alive == {(2, y) for y in range(5)} | {(3, y) for y in range(5)}


def test_blinker_oscillates():
    table = _table_with(5, [(1, 2), (2, 2), (3, 2)])
    start = table.copy()
    table.tick()
    assert table == _table_with(5, [(2, 1), (2, 2), (2, 3)])
    table.tick()
    assert table == start


def test_isolated_cell_dies():
    table = _table_with(5, [(2, 2)])
    table.tick()
    assert not table.is_alive_anywhere()


def test_crowded_cell_dies():
    table = _table_with(5, [(x, y) for x in (1, 2, 3) for y in (1, 2, 3)])
    table.tick()
    assert table.get(2, 2) is CellState.DEAD


def test_birth_needs_exactly_three():
    three = _table_with(5, [(1, 1), (3, 1), (2, 3)])
    three.tick()
    assert three.get(2, 2) is CellState.ALIVE

    two = _table_with(5, [(1, 1), (3, 1)])
    two.tick()
    assert two.get(2, 2) is CellState.DEAD

    four = _table_with(5, [(1, 1), (3, 1), (1, 3), (3, 3)])
    four.tick()
    assert four.get(2, 2) is CellState.DEAD


def test_update_is_synchronous():
    # cells are visited row-major; reading an updated (0, 1) while
    # evaluating (1, 1) would change the outcome
    table = _table_with(5, [(0, 1), (1, 1), (2, 1)])
    expected = _reference_step(table.to_array())
    table.tick()
    assert np.array_equal(table.to_array(), expected)
    assert table.population() == 3


def test_glider_travels_diagonally():
    glider = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]
    table = _table_with(8, glider)
    for _ in range(4):
        table.tick()
    assert table == _table_with(8, [(x + 1, y + 1) for x, y in glider])
    for _ in range(28):
        table.tick()
    assert table == _table_with(8, glider)


def test_tick_agrees_with_cell_by_cell_step():
    rng = np.random.default_rng(11)
    for height, width in [(3, 3), (5, 8), (9, 4)]:
        board = rng.integers(0, 2, size=(height, width), dtype=np.uint8)
        table = Table.from_array(board)
        for _ in range(5):
            board = _reference_step(board)
            table.tick()
            assert np.array_equal(table.to_array(), board)


def test_tick_keeps_shape():
    table = Table.of_size(7, 3)
    table.tick()
    assert len(table.values) == 21
    assert (table.width, table.height) == (7, 3)


def test_neighbor_counts_match_cell_by_cell_count():
    rng = np.random.default_rng(4)
    board = rng.integers(0, 2, size=(6, 7), dtype=np.uint8)
    counts = Table.from_array(board).neighbor_counts()
    for y in range(6):
        for x in range(7):
            window = board.take(range(y - 1, y + 2), axis=0, mode="wrap").take(range(x - 1, x + 2), axis=1, mode="wrap")
            assert counts[y, x] == int(window.sum()) - int(board[y, x])
