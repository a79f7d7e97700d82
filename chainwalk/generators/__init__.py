"""Sample generators built on :class:`~chainwalk.markov_chain.MarkovChain`.

- :mod:`chainwalk.generators.text` learns word adjacency from text.
- :mod:`chainwalk.generators.board` models a snakes and ladders board.
"""
