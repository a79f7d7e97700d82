"""
Chainwalk - a generic first-order Markov chain engine.

Feed it consecutive observations of any symbol type and it builds a weighted
transition model. It then samples sequences from that model with a seeded
random generator, so a given seed and ingestion order always reproduce the
same output.

- **Any symbol type.** States are compared, copied, released and tested for
  "end of sequence" through a ``StateCapabilities`` bundle supplied once per
  type.
- **Counted transitions.** Each state keeps its observed successors in first
  seen order with a running total, and the next state is drawn with
  probability proportional to its count.
- **Two sample generators.** ``chainwalk.generators.text`` writes sentences
  learnt from a text corpus; ``chainwalk.generators.board`` writes random
  snakes and ladders walks.

Minimal example:

    ```python
    import chainwalk

    chain = chainwalk.MarkovChain(chainwalk.StateCapabilities.for_values(), seed=7)
    chain.observe(["A", "B", "A", "C"])

    start = chain.find_or_create("A")
    print(chain.walk(start, max_length=5))
    ```

Package-level exports: ``MarkovChain``, ``StateCapabilities``, ``AllocationError``,
``NoStartStateError``.
"""

import chainwalk.capabilities
import chainwalk.errors
import chainwalk.markov_chain


MarkovChain = chainwalk.markov_chain.MarkovChain
StateCapabilities = chainwalk.capabilities.StateCapabilities
AllocationError = chainwalk.errors.AllocationError
NoStartStateError = chainwalk.errors.NoStartStateError
