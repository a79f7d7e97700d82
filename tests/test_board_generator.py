import io

import pytest

import chainwalk.generators.board

import conftest


def _numbers (states) -> list:

	return [cell.number for cell in states]


def test_create_board_places_snakes_and_ladders () -> None:

	"""Jumps up should become ladders and jumps down snakes."""

	cells = chainwalk.generators.board.create_board()

	assert len(cells) == 100
	assert cells[12] == chainwalk.generators.board.Cell(number=13, snake_to=4)
	assert cells[7] == chainwalk.generators.board.Cell(number=8, ladder_to=30)
	assert cells[0].jump_to is None


def test_create_board_rejects_jump_off_board () -> None:

	"""A jump outside the board should raise."""

	with pytest.raises(ValueError):
		chainwalk.generators.board.create_board(board_size=10, jumps=[(5, 11)])


def test_jump_cell_has_single_edge () -> None:

	"""A snake or ladder cell should lead only to its destination."""

	chain = chainwalk.generators.board.build_chain(seed=1)

	for start, end in chainwalk.generators.board.TRANSITIONS:
		table = chain.registry.node_at(start - 1).table
		assert len(table) == 1
		assert table.entries[0].destination.state.number == end


def test_regular_cell_has_six_dice_edges () -> None:

	"""A plain cell away from the end should have one edge per dice face."""

	chain = chainwalk.generators.board.build_chain(seed=1)
	table = chain.registry.node_at(0).table

	assert _numbers(entry.destination.state for entry in table.entries) == [2, 3, 4, 5, 6, 7]
	assert table.total == 6


def test_cells_near_the_end_have_fewer_edges () -> None:

	"""Rolls that would overshoot the board should be dropped."""

	chain = chainwalk.generators.board.build_chain(seed=1)

	assert _numbers(e.destination.state for e in chain.registry.node_at(97).table.entries) == [99, 100]
	assert _numbers(e.destination.state for e in chain.registry.node_at(98).table.entries) == [100]
	assert len(chain.registry.node_at(99).table) == 0


def test_cells_compare_by_number () -> None:

	"""Two cells with the same number should be the same state."""

	caps = chainwalk.generators.board.make_capabilities()

	assert caps.equal(chainwalk.generators.board.Cell(5), chainwalk.generators.board.Cell(5, ladder_to=9))
	assert caps.compare(chainwalk.generators.board.Cell(3), chainwalk.generators.board.Cell(5)) < 0


def test_zero_draws_take_the_smallest_roll () -> None:

	"""Always rolling the first option should climb one cell at a time and take every jump."""

	chain = chainwalk.generators.board.build_chain(rng=conftest.always(0))

	walk = chain.walk(chain.registry.node_at(0), 60)

	assert _numbers(walk) == list(range(1, 9)) + list(range(30, 34)) + list(range(70, 80)) + [99, 100]


def test_format_cell () -> None:

	"""Snakes, ladders, the last cell and plain cells should each render differently."""

	board = chainwalk.generators.board

	assert board.format_cell(board.Cell(13, snake_to=4)) == " [13] -snake to->"
	assert board.format_cell(board.Cell(8, ladder_to=30)) == " [8] -ladder to->"
	assert board.format_cell(board.Cell(100)) == " [100]"
	assert board.format_cell(board.Cell(42)) == " [42] ->"


def test_generate_walks_output_format () -> None:

	"""Each walk should be numbered and start at cell 1."""

	chain = chainwalk.generators.board.build_chain(rng=conftest.always(0))
	out = io.StringIO()

	chainwalk.generators.board.generate_walks(chain, 2, max_length=4, stream=out)

	assert out.getvalue() == (
		"Random Walk 1: [1] -> [2] -> [3] -> [4] ->\n"
		"Random Walk 2: [1] -> [2] -> [3] -> [4] ->\n"
	)


def test_walks_end_at_last_cell_or_cap () -> None:

	"""A seeded walk should either reach cell 100 or stop at the length cap."""

	chain = chainwalk.generators.board.build_chain(seed=123)

	for _ in range(50):
		walk = chain.walk(chain.registry.node_at(0), 60)
		assert len(walk) <= 60
		assert walk[-1].number == 100 or len(walk) == 60
		assert all(cell.number != 100 for cell in walk[:-1])
