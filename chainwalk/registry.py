"""Deduplicated, insertion-ordered store of observed states.

The :class:`StateRegistry` is the sole owner of every :class:`StateNode`.
Lookups are a linear scan using the caller's comparator, so the first node
registered for a value is always the one returned.
"""

import logging
import typing

import chainwalk.capabilities
import chainwalk.errors
import chainwalk.transition_table


logger = logging.getLogger(__name__)


class StateNode:

	"""
	One registered state and its outgoing transitions.

	The wrapped ``state`` is the engine's own copy, made when the node was
	created. After teardown it is ``None`` and the table is empty.
	"""

	__slots__ = ("state", "table")

	def __init__ (self, state: typing.Any) -> None:

		self.state: typing.Any = state
		self.table = chainwalk.transition_table.TransitionTable()


	def __repr__ (self) -> str:

		return f"StateNode({self.state!r}, edges={len(self.table)}, total={self.table.total})"


class StateRegistry:

	"""An append-only list of state nodes, unique by comparator equality."""

	def __init__ (self, capabilities: chainwalk.capabilities.StateCapabilities) -> None:

		"""
		Initialize an empty registry for one symbol type.
		"""

		self.capabilities = capabilities
		self._nodes: typing.List[StateNode] = []
		self._destroyed: bool = False


	def __len__ (self) -> int:

		return len(self._nodes)


	def __iter__ (self) -> typing.Iterator[StateNode]:

		return iter(self._nodes)


	@property
	def destroyed (self) -> bool:

		"""Return True once ``destroy()`` has run."""

		return self._destroyed


	def node_at (self, index: int) -> StateNode:

		"""Return the node registered at ``index`` (insertion order)."""

		return self._nodes[index]


	def find_existing (self, symbol: typing.Any) -> typing.Optional[StateNode]:

		"""
		Return the first node whose state equals ``symbol``, or ``None``.
		"""

		for node in self._nodes:
			if self.capabilities.equal(node.state, symbol):
				return node

		return None


	def find_or_create (self, symbol: typing.Any) -> StateNode:

		"""
		Return the node for ``symbol``, registering a copy of it if needed.

		Raises:
			AllocationError: If the symbol cannot be copied or the registry
				cannot grow. Nothing is registered in that case.
			RuntimeError: If the registry has already been destroyed.
		"""

		if self._destroyed:
			raise RuntimeError("Registry has been destroyed")

		existing = self.find_existing(symbol)

		if existing is not None:
			return existing

		try:
			state = self.capabilities.duplicate(symbol)

		except MemoryError as exc:
			raise chainwalk.errors.AllocationError(f"Failed to copy state {symbol!r}") from exc

		if state is None:
			raise chainwalk.errors.AllocationError(f"Failed to copy state {symbol!r}")

		try:
			node = StateNode(state)
			self._nodes.append(node)

		except MemoryError as exc:
			self.capabilities.destroy(state)
			raise chainwalk.errors.AllocationError("Failed to grow registry") from exc

		logger.debug(f"Registered state {state!r} at index {len(self._nodes) - 1}")

		return node


	def destroy (self) -> None:

		"""
		Release every state and drop every node, in insertion order.

		Safe on an empty registry; calling it again does nothing.
		"""

		if self._destroyed:
			return

		# Detach first so a destructor that raises cannot lead to a second release.
		nodes = self._nodes
		self._nodes = []
		self._destroyed = True

		for node in nodes:
			state = node.state
			node.state = None
			node.table.clear()
			self.capabilities.destroy(state)

		logger.debug(f"Destroyed registry with {len(nodes)} states")
