"""Per-state adjacency counts.

A :class:`TransitionTable` belongs to exactly one source
:class:`~chainwalk.registry.StateNode` and records how often each destination
was observed immediately after it. Destinations are plain references into the
registry; the table never owns or releases them.
"""

import dataclasses
import logging
import typing

import chainwalk.capabilities
import chainwalk.errors

if typing.TYPE_CHECKING:
	import chainwalk.registry


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class TransitionEntry:

	"""One observed destination and how many times it followed the source."""

	destination: "chainwalk.registry.StateNode"
	count: int = 1


class TransitionTable:

	"""
	An ordered list of (destination, count) entries plus their running total.

	Entries keep the order in which destinations were first observed and are
	unique by destination. ``total`` always equals the sum of all counts.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty table.
		"""

		self._entries: typing.List[TransitionEntry] = []
		self._total: int = 0


	@property
	def total (self) -> int:

		"""Return the number of observations recorded in this table."""

		return self._total


	@property
	def entries (self) -> typing.Tuple[TransitionEntry, ...]:

		"""Return a snapshot of the entries in first-observed order."""

		return tuple(self._entries)


	def __len__ (self) -> int:

		return len(self._entries)


	def __bool__ (self) -> bool:

		return bool(self._entries)


	def find_entry (
		self,
		destination: "chainwalk.registry.StateNode",
		capabilities: chainwalk.capabilities.StateCapabilities
	) -> typing.Optional[TransitionEntry]:

		"""
		Return the entry whose destination state equals ``destination``'s state.
		"""

		for entry in self._entries:
			if capabilities.equal(entry.destination.state, destination.state):
				return entry

		return None


	def record_transition (
		self,
		destination: "chainwalk.registry.StateNode",
		capabilities: chainwalk.capabilities.StateCapabilities
	) -> None:

		"""
		Record one more observation of ``destination`` following this table's source.

		An existing entry has its count bumped; otherwise a new entry with a
		count of one is appended. Either way the total grows by exactly one.

		Raises:
			AllocationError: If a new entry cannot be appended. The table is
				left unchanged.
		"""

		entry = self.find_entry(destination, capabilities)

		if entry is not None:
			entry.count += 1
			self._total += 1
			return

		try:
			self._entries.append(TransitionEntry(destination=destination))

		except MemoryError as exc:
			raise chainwalk.errors.AllocationError("Failed to grow transition table") from exc

		self._total += 1

		logger.debug(f"New edge to {destination.state!r} ({len(self._entries)} destinations)")


	def count_for (
		self,
		destination: "chainwalk.registry.StateNode",
		capabilities: chainwalk.capabilities.StateCapabilities
	) -> int:

		"""Return how often ``destination`` was observed, or 0."""

		entry = self.find_entry(destination, capabilities)

		return entry.count if entry is not None else 0


	def probability_for (
		self,
		destination: "chainwalk.registry.StateNode",
		capabilities: chainwalk.capabilities.StateCapabilities
	) -> float:

		"""Return the share of observations that went to ``destination``."""

		if self._total == 0:
			return 0.0

		return self.count_for(destination, capabilities) / self._total


	def clear (self) -> None:

		"""Drop every entry. Only teardown calls this."""

		self._entries.clear()
		self._total = 0
