import itertools
import random
import typing

import pytest

import chainwalk.capabilities


class ScriptedRandom (random.Random):

	"""Random stub whose ``randrange`` returns scripted values in order."""

	def __init__ (self, values: typing.Iterable[int]) -> None:

		"""Cycle through ``values`` forever."""

		super().__init__(0)
		self._values = itertools.cycle(list(values))
		self.bounds: typing.List[int] = []

	def randrange (self, start: int, stop: typing.Optional[int] = None, step: int = 1) -> int:  # type: ignore[override]

		"""Record the bound and return the next scripted value."""

		self.bounds.append(start if stop is None else stop)
		return next(self._values)


class CountingCapabilities:

	"""Capability bundle for strings that counts copies and releases."""

	def __init__ (self, terminal: typing.Iterable[str] = ()) -> None:

		"""Treat every value in ``terminal`` as a terminal state."""

		self.terminal = set(terminal)
		self.copied: typing.List[str] = []
		self.destroyed: typing.List[str] = []
		self.bundle = chainwalk.capabilities.StateCapabilities(
			compare = chainwalk.capabilities.compare_values,
			duplicate = self.duplicate,
			destroy = self.destroyed.append,
			is_terminal = self.terminal.__contains__
		)

	def duplicate (self, value: str) -> str:

		"""Copy a string and remember it was copied."""

		self.copied.append(value)
		return "".join(value)


@pytest.fixture
def counting () -> CountingCapabilities:

	"""A fresh counting capability bundle with no terminal states."""

	return CountingCapabilities()


def always (value: int) -> ScriptedRandom:

	"""Return a random stub that always draws ``value``."""

	return ScriptedRandom([value])
