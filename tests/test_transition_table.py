import random

import pytest

import chainwalk.capabilities
import chainwalk.errors
import chainwalk.registry


CAPS = chainwalk.capabilities.StateCapabilities.for_values()


def _nodes (*symbols: str):

	registry = chainwalk.registry.StateRegistry(CAPS)
	return [registry.find_or_create(symbol) for symbol in symbols]


def test_first_transition_creates_single_entry () -> None:

	"""Recording into an empty table should leave one entry with count and total 1."""

	a, b = _nodes("A", "B")

	a.table.record_transition(b, CAPS)

	assert [(entry.destination.state, entry.count) for entry in a.table.entries] == [("B", 1)]
	assert a.table.total == 1


def test_repeat_transition_increments_without_duplicate () -> None:

	"""Recording A -> B twice should give B a count of 2 in a single entry."""

	a, b = _nodes("A", "B")

	a.table.record_transition(b, CAPS)
	a.table.record_transition(b, CAPS)

	assert len(a.table) == 1
	assert a.table.count_for(b, CAPS) == 2
	assert a.table.total == 2


def test_new_destinations_keep_first_seen_order () -> None:

	"""Entries should appear in the order destinations were first observed."""

	a, b, c, d = _nodes("A", "B", "C", "D")

	for destination in [c, b, c, d, b, c]:
		a.table.record_transition(destination, CAPS)

	assert [entry.destination.state for entry in a.table.entries] == ["C", "B", "D"]
	assert [entry.count for entry in a.table.entries] == [3, 2, 1]


def test_total_matches_sum_of_counts () -> None:

	"""The running total should equal the sum of counts after every update."""

	nodes = _nodes(*"ABCDEFG")
	source = nodes[0]
	rng = random.Random(3)

	for _ in range(500):
		source.table.record_transition(rng.choice(nodes), CAPS)
		assert source.table.total == sum(entry.count for entry in source.table.entries)

	assert source.table.total == 500
	assert all(entry.count >= 1 for entry in source.table.entries)


def test_self_transition () -> None:

	"""A state may follow itself."""

	(a,) = _nodes("A")

	a.table.record_transition(a, CAPS)

	assert a.table.entries[0].destination is a


def test_probability_for () -> None:

	"""Probability should be the destination's share of the total."""

	a, b, c = _nodes("A", "B", "C")

	for destination in [b, b, b, c]:
		a.table.record_transition(destination, CAPS)

	assert a.table.probability_for(b, CAPS) == pytest.approx(0.75)
	assert a.table.probability_for(c, CAPS) == pytest.approx(0.25)
	assert b.table.probability_for(c, CAPS) == 0.0


def test_entries_is_a_snapshot () -> None:

	"""Mutating the returned entries tuple should be impossible."""

	a, b = _nodes("A", "B")
	a.table.record_transition(b, CAPS)

	assert isinstance(a.table.entries, tuple)


class _FailingList (list):

	"""A list that cannot grow."""

	def append (self, item) -> None:

		raise MemoryError()


def test_growth_failure_leaves_table_unchanged () -> None:

	"""A failed append should raise AllocationError and keep the previous entries and total."""

	a, b, c = _nodes("A", "B", "C")
	a.table.record_transition(b, CAPS)
	a.table._entries = _FailingList(a.table._entries)

	with pytest.raises(chainwalk.errors.AllocationError):
		a.table.record_transition(c, CAPS)

	assert [entry.destination.state for entry in a.table.entries] == ["B"]
	assert a.table.total == 1

	# Existing destinations can still be counted since no growth is needed.
	a.table.record_transition(b, CAPS)
	assert a.table.total == 2
