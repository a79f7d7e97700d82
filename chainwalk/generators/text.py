"""Word-level sentence generator.

Learns which word follows which from a text corpus and emits short
sentence-like sequences. A word ending in ``.`` closes a sentence: no
transition is recorded out of it, and generation stops when it is reached.
"""

import itertools
import logging
import random
import re
import sys
import typing

import chainwalk.capabilities
import chainwalk.markov_chain


logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 20
SENTENCE_END = "."
DELIMITERS = re.compile(r"[ \t\r\n]+")


def is_sentence_end (word: str) -> bool:

	"""Return True if ``word`` ends a sentence."""

	return word.endswith(SENTENCE_END)


def compare_words (first: str, second: str) -> int:

	"""Three-way compare two words."""

	return (first > second) - (first < second)


WORD_CAPABILITIES: chainwalk.capabilities.StateCapabilities = chainwalk.capabilities.StateCapabilities(
	compare = compare_words,
	duplicate = str,
	is_terminal = is_sentence_end
)


def tokenize (lines: typing.Iterable[str]) -> typing.Iterator[str]:

	"""
	Yield words from ``lines`` in order.

	Only space, tab, carriage return and line feed separate words. Other
	whitespace such as form feeds or non-breaking spaces stays inside a word.
	"""

	for line in lines:
		for word in DELIMITERS.split(line):
			if word:
				yield word


def fill_chain (
	chain: chainwalk.markov_chain.MarkovChain,
	lines: typing.Iterable[str],
	words_to_read: typing.Optional[int] = None
) -> int:

	"""
	Register words from ``lines`` and the adjacencies between them.

	Adjacency carries across line breaks. With ``words_to_read`` set, only
	that many words are read.

	Returns:
		The number of words read.
	"""

	words = tokenize(lines)

	if words_to_read is not None:
		if words_to_read < 0:
			raise ValueError("Words to read cannot be negative")
		words = itertools.islice(words, words_to_read)

	previous = None
	count = 0

	for word in words:
		node = chain.find_or_create(word)

		if previous is not None and not is_sentence_end(previous.state):
			chain.record_transition(previous, node)

		previous = node
		count += 1

	logger.info(f"Read {count} words, {len(chain)} distinct")

	return count


def build_chain (
	lines: typing.Iterable[str],
	seed: typing.Optional[int] = None,
	words_to_read: typing.Optional[int] = None,
	rng: typing.Optional[random.Random] = None
) -> chainwalk.markov_chain.MarkovChain:

	"""Create a word chain and fill it from ``lines``."""

	chain = chainwalk.markov_chain.MarkovChain(WORD_CAPABILITIES, seed=seed, rng=rng)
	fill_chain(chain, lines, words_to_read=words_to_read)

	return chain


def generate_tweets (
	chain: chainwalk.markov_chain.MarkovChain,
	count: int,
	max_length: int = DEFAULT_MAX_LENGTH,
	stream: typing.Optional[typing.TextIO] = None
) -> None:

	"""
	Write ``count`` generated sentences, one per line.

	Each line reads ``Tweet n: `` followed by the words, each with a
	trailing space.
	"""

	out = stream or sys.stdout

	def emit (word: str) -> None:
		out.write(f"{word} ")

	for number in range(1, count + 1):
		start = chain.first_state()

		out.write(f"Tweet {number}: ")
		emit(start.state)
		chain.generate(start, max_length, on_visit=emit)

		out.write("\n")
