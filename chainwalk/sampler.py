import logging
import random
import typing

import chainwalk.transition_table

if typing.TYPE_CHECKING:
	import chainwalk.registry


logger = logging.getLogger(__name__)


def choose_cumulative (
	entries: typing.Sequence[chainwalk.transition_table.TransitionEntry],
	roll: int
) -> "chainwalk.registry.StateNode":

	"""
	Pick the entry whose cumulative count range contains ``roll``.

	Entries are scanned in order; the first one whose running sum is strictly
	greater than ``roll`` wins, so entry ``i`` owns the half-open range
	``[sum(counts[:i]), sum(counts[:i + 1]))``. A roll past the end falls back
	to the first entry.
	"""

	if not entries:
		raise ValueError("Entries cannot be empty")

	accum = 0

	for entry in entries:
		accum += entry.count
		if accum > roll:
			return entry.destination

	logger.debug(f"Roll {roll} outside cumulative total {accum}, using first entry")

	return entries[0].destination


class Sampler:

	"""
	Seeded source of uniform and count-weighted draws.

	Each sampler owns its own ``random.Random`` so that a given seed and
	ingestion order reproduce the same sequences regardless of anything else
	in the process drawing random numbers.
	"""

	def __init__ (self, seed: typing.Optional[int] = None, rng: typing.Optional[random.Random] = None) -> None:

		"""
		Initialize with a seed or an existing random generator.
		"""

		if rng is not None and seed is not None:
			raise ValueError("Pass either a seed or an rng, not both")

		self.seed = seed
		self.rng = rng or random.Random(seed)


	def pick_uniform (self, bound: int) -> int:

		"""
		Return a uniformly random integer in ``[0, bound)``.
		"""

		if bound < 1:
			raise ValueError("Bound must be positive")

		return self.rng.randrange(bound)


	def select_weighted (self, table: chainwalk.transition_table.TransitionTable) -> "chainwalk.registry.StateNode":

		"""
		Choose a destination with probability proportional to its count.
		"""

		if not table:
			raise ValueError("Transition table cannot be empty")

		roll = self.pick_uniform(table.total)

		return choose_cumulative(table.entries, roll)
