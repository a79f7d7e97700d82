"""Error types raised by the transition-model engine."""


class ChainwalkError (Exception):

	"""Base class for engine failures surfaced to the caller."""


class AllocationError (ChainwalkError, MemoryError):

	"""
	A registry or transition table could not grow.

	Raised when duplicating a new state or appending a new entry fails. The
	structure being grown is left exactly as it was before the call.
	"""


class NoStartStateError (ChainwalkError, ValueError):

	"""
	No non-terminal state is available to start a sequence from.

	Raised by ``MarkovChain.first_state()`` when the registry is empty or every
	registered state satisfies the terminal predicate.
	"""
