"""Per-symbol-type capability bundle.

The engine never inspects a state directly. Everything it needs to know
about a symbol (equality, copying, release and whether it ends a sequence)
comes from a :class:`StateCapabilities` instance built once per symbol type.
"""

import copy
import dataclasses
import typing


StateType = typing.TypeVar("StateType")

CompareType = typing.Callable[[typing.Any, typing.Any], int]
DuplicateType = typing.Callable[[typing.Any], typing.Any]
DestroyType = typing.Callable[[typing.Any], None]
TerminalType = typing.Callable[[typing.Any], bool]
VisitType = typing.Callable[[typing.Any], None]


def compare_values (first: typing.Any, second: typing.Any) -> int:

	"""
	Three-way compare two plain values (negative, zero or positive).

	Values that are unequal but have no ordering (dicts, mixed types) compare
	as positive. Only equality matters to the engine.
	"""

	if first == second:
		return 0

	try:
		return -1 if first < second else 1

	except TypeError:
		return 1


def _release (state: typing.Any) -> None:

	"""Plain values need no explicit release."""

	return None


def _never_terminal (state: typing.Any) -> bool:

	return False


@dataclasses.dataclass(frozen=True)
class StateCapabilities (typing.Generic[StateType]):

	"""
	Operations the engine needs from one symbol type.

	Attributes:
		compare: Returns zero when two states are equal. Used for registry
			deduplication and transition destination lookup.
		duplicate: Returns a deep copy; called once per newly registered state.
			Returning ``None`` signals that the copy could not be made.
		destroy: Releases one state; called once per state during teardown.
		is_terminal: Returns ``True`` for states that end a sequence.

	Example:
		```python
		caps = StateCapabilities(
			compare = lambda a, b: (a > b) - (a < b),
			duplicate = str,
			destroy = lambda s: None,
			is_terminal = lambda s: s.endswith("."),
		)
		```
	"""

	compare: CompareType
	duplicate: DuplicateType
	destroy: DestroyType = _release
	is_terminal: TerminalType = _never_terminal

	@classmethod
	def for_values (cls, is_terminal: typing.Optional[TerminalType] = None) -> "StateCapabilities":

		"""Build a bundle for ordinary comparable Python values."""

		return cls(
			compare = compare_values,
			duplicate = copy.deepcopy,
			destroy = _release,
			is_terminal = is_terminal or _never_terminal
		)

	def equal (self, first: typing.Any, second: typing.Any) -> bool:

		"""Return True if the comparator reports the two states as equal."""

		return self.compare(first, second) == 0
