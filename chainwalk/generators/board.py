"""Snakes and ladders path simulator.

Each cell of the board is a state. A cell at the foot of a ladder or the head
of a snake has a single transition to the far end. Every other cell has one
transition per dice face (1 to 6) that lands on the board, so all rolls are
equally likely. The last cell ends a walk.
"""

import dataclasses
import functools
import logging
import random
import sys
import typing

import chainwalk.capabilities
import chainwalk.markov_chain


logger = logging.getLogger(__name__)

BOARD_SIZE = 100
DICE_MAX = 6
DEFAULT_MAX_LENGTH = 60

# (from, to): a ladder when from < to, otherwise a snake.
TRANSITIONS: typing.Tuple[typing.Tuple[int, int], ...] = (
	(13, 4),
	(85, 17),
	(95, 67),
	(97, 58),
	(66, 89),
	(87, 31),
	(57, 83),
	(91, 25),
	(28, 50),
	(35, 11),
	(8, 30),
	(41, 62),
	(81, 43),
	(69, 32),
	(20, 39),
	(33, 70),
	(79, 99),
	(23, 76),
	(15, 47),
	(61, 14),
)


@dataclasses.dataclass(frozen=True)
class Cell:

	"""
	One square of the board.

	Attributes:
		number: Cell number, starting at 1.
		ladder_to: Destination if a ladder starts here.
		snake_to: Destination if a snake's head is here.
	"""

	number: int
	ladder_to: typing.Optional[int] = None
	snake_to: typing.Optional[int] = None

	@property
	def jump_to (self) -> typing.Optional[int]:

		"""Return the snake or ladder destination, if any."""

		if self.ladder_to is not None:
			return self.ladder_to

		return self.snake_to


def compare_cells (first: Cell, second: Cell) -> int:

	"""Order cells by number."""

	return first.number - second.number


def copy_cell (cell: Cell) -> Cell:

	return dataclasses.replace(cell)


def is_last_cell (cell: Cell, board_size: int = BOARD_SIZE) -> bool:

	"""Return True if ``cell`` is the final square."""

	return cell.number == board_size


def make_capabilities (board_size: int = BOARD_SIZE) -> chainwalk.capabilities.StateCapabilities:

	"""Build the capability bundle for cells on a board of ``board_size``."""

	return chainwalk.capabilities.StateCapabilities(
		compare = compare_cells,
		duplicate = copy_cell,
		is_terminal = functools.partial(is_last_cell, board_size=board_size)
	)


def create_board (
	board_size: int = BOARD_SIZE,
	jumps: typing.Iterable[typing.Tuple[int, int]] = TRANSITIONS
) -> typing.List[Cell]:

	"""
	Return the cells of a board in order, with snakes and ladders placed.
	"""

	if board_size < 1:
		raise ValueError("Board size must be positive")

	ladders: typing.Dict[int, int] = {}
	snakes: typing.Dict[int, int] = {}

	for start, end in jumps:

		if not (1 <= start <= board_size and 1 <= end <= board_size):
			raise ValueError(f"Jump {start} -> {end} is off a board of {board_size} cells")

		if start == end:
			raise ValueError(f"Jump {start} -> {end} goes nowhere")

		if start < end:
			ladders[start] = end
		else:
			snakes[start] = end

	return [
		Cell(number=number, ladder_to=ladders.get(number), snake_to=snakes.get(number))
		for number in range(1, board_size + 1)
	]


def fill_chain (chain: chainwalk.markov_chain.MarkovChain, cells: typing.Sequence[Cell]) -> None:

	"""
	Register every cell and its outgoing moves.
	"""

	board_size = len(cells)

	for cell in cells:
		chain.find_or_create(cell)

	for cell in cells:
		source = chain.find_or_create(cell)

		if cell.jump_to is not None:
			chain.record_transition(source, chain.find_or_create(cells[cell.jump_to - 1]))
			continue

		for roll in range(1, DICE_MAX + 1):
			index = cell.number + roll - 1

			if index >= board_size:
				break

			chain.record_transition(source, chain.find_or_create(cells[index]))

	logger.info(f"Built board with {board_size} cells")


def build_chain (
	seed: typing.Optional[int] = None,
	board_size: int = BOARD_SIZE,
	jumps: typing.Iterable[typing.Tuple[int, int]] = TRANSITIONS,
	rng: typing.Optional[random.Random] = None
) -> chainwalk.markov_chain.MarkovChain:

	"""Create a chain modelling the board."""

	chain = chainwalk.markov_chain.MarkovChain(make_capabilities(board_size), seed=seed, rng=rng)
	fill_chain(chain, create_board(board_size, jumps))

	return chain


def format_cell (cell: Cell, board_size: int = BOARD_SIZE) -> str:

	"""
	Render one step of a walk.
	"""

	if cell.snake_to is not None:
		return f" [{cell.number}] -snake to->"

	if cell.ladder_to is not None:
		return f" [{cell.number}] -ladder to->"

	if cell.number == board_size:
		return f" [{cell.number}]"

	return f" [{cell.number}] ->"


def generate_walks (
	chain: chainwalk.markov_chain.MarkovChain,
	count: int,
	max_length: int = DEFAULT_MAX_LENGTH,
	stream: typing.Optional[typing.TextIO] = None
) -> None:

	"""
	Write ``count`` random walks from the first cell, one per line.
	"""

	out = stream or sys.stdout
	board_size = len(chain)

	def emit (cell: Cell) -> None:
		out.write(format_cell(cell, board_size))

	for number in range(1, count + 1):
		start = chain.registry.node_at(0)

		out.write(f"Random Walk {number}:")
		emit(start.state)
		chain.generate(start, max_length, on_visit=emit)

		out.write("\n")
