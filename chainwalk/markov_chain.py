"""First-order Markov chain over caller-defined states.

:class:`MarkovChain` ties together a :class:`~chainwalk.registry.StateRegistry`,
the caller's :class:`~chainwalk.capabilities.StateCapabilities` and a seeded
:class:`~chainwalk.sampler.Sampler`. Typical use:

	```python
	caps = chainwalk.capabilities.StateCapabilities.for_values()
	chain = chainwalk.markov_chain.MarkovChain(caps, seed=42)

	words = "the cat sat on the mat.".split()
	chain.observe(words)

	start = chain.first_state()
	print(chain.walk(start, max_length=10))

	chain.destroy()
	```
"""

import logging
import random
import typing

import chainwalk.capabilities
import chainwalk.errors
import chainwalk.registry
import chainwalk.sampler


logger = logging.getLogger(__name__)


class MarkovChain:

	"""
	A weighted, append-only transition model with sequence generation.
	"""

	def __init__ (
		self,
		capabilities: chainwalk.capabilities.StateCapabilities,
		seed: typing.Optional[int] = None,
		rng: typing.Optional[random.Random] = None
	) -> None:

		"""
		Initialize an empty chain for one symbol type.

		Parameters:
			capabilities: Comparator, copier, destructor and terminal predicate
				for the symbol type.
			seed: Seed for the chain's own random generator.
			rng: An existing generator to use instead of seeding a new one.
		"""

		self.capabilities = capabilities
		self.registry = chainwalk.registry.StateRegistry(capabilities)
		self.sampler = chainwalk.sampler.Sampler(seed=seed, rng=rng)


	def __len__ (self) -> int:

		return len(self.registry)


	def find_or_create (self, symbol: typing.Any) -> chainwalk.registry.StateNode:

		"""Return the node for ``symbol``, registering it if new."""

		return self.registry.find_or_create(symbol)


	def record_transition (self, source: chainwalk.registry.StateNode, destination: chainwalk.registry.StateNode) -> None:

		"""Count one observation of ``destination`` immediately after ``source``."""

		source.table.record_transition(destination, self.capabilities)


	def observe (self, symbols: typing.Iterable[typing.Any]) -> typing.Optional[chainwalk.registry.StateNode]:

		"""
		Register a run of consecutive symbols and every adjacency between them.

		Returns the node of the last symbol, or ``None`` for an empty run.
		"""

		previous: typing.Optional[chainwalk.registry.StateNode] = None

		for symbol in symbols:
			node = self.find_or_create(symbol)

			if previous is not None:
				self.record_transition(previous, node)

			previous = node

		return previous


	def first_state (self, is_terminal: typing.Optional[chainwalk.capabilities.TerminalType] = None) -> chainwalk.registry.StateNode:

		"""
		Draw a random non-terminal node, every registered state equally likely.

		Raises:
			NoStartStateError: If the registry is empty or holds only terminal
				states.
		"""

		is_terminal = is_terminal or self.capabilities.is_terminal

		if not any(not is_terminal(node.state) for node in self.registry):
			raise chainwalk.errors.NoStartStateError(
				f"No non-terminal state among {len(self.registry)} registered states"
			)

		while True:
			node = self.registry.node_at(self.sampler.pick_uniform(len(self.registry)))

			if not is_terminal(node.state):
				return node


	def next_state (self, current: chainwalk.registry.StateNode) -> chainwalk.registry.StateNode:

		"""
		Choose the successor of ``current`` by observed frequency.
		"""

		if not current.table:
			# A state never seen followed by anything stays where it is.
			logger.debug(f"No outgoing transitions from {current.state!r}, staying")
			return current

		return self.sampler.select_weighted(current.table)


	def generate (
		self,
		start: chainwalk.registry.StateNode,
		max_length: int,
		is_terminal: typing.Optional[chainwalk.capabilities.TerminalType] = None,
		on_visit: typing.Optional[chainwalk.capabilities.VisitType] = None
	) -> int:

		"""
		Walk the chain from ``start``, passing each new state to ``on_visit``.

		The caller emits ``start`` itself; it counts towards ``max_length``, so
		at most ``max_length - 1`` states reach ``on_visit``. The walk stops as
		soon as the current state is terminal or the length cap is reached.

		Returns:
			The number of states passed to ``on_visit``.
		"""

		if max_length < 1:
			raise ValueError("Max length must be positive")

		is_terminal = is_terminal or self.capabilities.is_terminal
		current = start
		emitted = 1

		while not is_terminal(current.state) and emitted < max_length:
			current = self.next_state(current)

			if on_visit is not None:
				on_visit(current.state)

			emitted += 1

		return emitted - 1


	def walk (self, start: chainwalk.registry.StateNode, max_length: int) -> typing.List[typing.Any]:

		"""Return a full generated sequence, ``start`` included."""

		states = [start.state]
		self.generate(start, max_length, on_visit=states.append)

		return states


	def destroy (self) -> None:

		"""Release every state and transition table. Safe to call twice."""

		self.registry.destroy()
