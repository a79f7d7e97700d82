"""Command-line entry point.

Usage:
    python -m chainwalk tweets SEED COUNT PATH [WORDS_TO_READ]
    python -m chainwalk snakes SEED COUNT

Options:
    --config PATH       YAML configuration file (default: config.yaml)
    --log-level LEVEL   Override the configured logging level
"""

import argparse
import logging
import sys
import typing

import yaml

import chainwalk.config
import chainwalk.errors
import chainwalk.generators.board
import chainwalk.generators.text


logger = logging.getLogger(__name__)


def _non_negative_int (value: str) -> int:

	number = int(value)

	if number < 0:
		raise argparse.ArgumentTypeError(f"{value} is negative")

	return number


def build_parser () -> argparse.ArgumentParser:

	"""Return the argument parser for both generators."""

	parser = argparse.ArgumentParser(prog="chainwalk", description="Generate random sequences from Markov chains")
	parser.add_argument("--config", default=chainwalk.config.DEFAULT_CONFIG_PATH, help="YAML config file (default: config.yaml)")
	parser.add_argument("--log-level", default=None, type=str.upper, choices=chainwalk.config.LOG_LEVELS, help="Logging level, e.g. DEBUG or INFO")

	subparsers = parser.add_subparsers(dest="command", required=True)

	tweets = subparsers.add_parser("tweets", help="Generate sentences from a text corpus")
	tweets.add_argument("seed", type=int, help="Random seed")
	tweets.add_argument("count", type=_non_negative_int, help="Number of sentences to generate")
	tweets.add_argument("path", help="Path to the text corpus")
	tweets.add_argument("words_to_read", type=_non_negative_int, nargs="?", default=None, help="Read at most this many words")

	snakes = subparsers.add_parser("snakes", help="Generate snakes and ladders walks")
	snakes.add_argument("seed", type=int, help="Random seed")
	snakes.add_argument("count", type=_non_negative_int, help="Number of walks to generate")

	return parser


def run_tweets (args: argparse.Namespace, config: dict, stream: typing.TextIO) -> None:

	"""Build a word chain from the corpus file and write sentences."""

	text_config = config["text"]
	words_to_read = args.words_to_read if args.words_to_read is not None else text_config.get("words_to_read")

	# Undecodable bytes become U+FFFD so any corpus can be read.
	with open(args.path, 'r', encoding="utf-8", errors="replace") as f:
		chain = chainwalk.generators.text.build_chain(f, seed=args.seed, words_to_read=words_to_read)

	try:
		chainwalk.generators.text.generate_tweets(chain, args.count, max_length=text_config["max_length"], stream=stream)
	finally:
		chain.destroy()


def run_snakes (args: argparse.Namespace, config: dict, stream: typing.TextIO) -> None:

	"""Build the board chain and write random walks."""

	chain = chainwalk.generators.board.build_chain(seed=args.seed)

	try:
		chainwalk.generators.board.generate_walks(chain, args.count, max_length=config["board"]["max_length"], stream=stream)
	finally:
		chain.destroy()


def main (argv: typing.Optional[typing.List[str]] = None, stream: typing.Optional[typing.TextIO] = None) -> int:

	"""
	Main entry point. Returns the process exit status.
	"""

	args = build_parser().parse_args(argv)

	try:
		config = chainwalk.config.load_config(args.config)
	except (OSError, ValueError, yaml.YAMLError) as exc:
		logging.basicConfig(level=logging.WARNING)
		logger.error(f"Could not load config: {exc}")
		return 1

	logging.basicConfig(level=args.log_level or config["logging"]["level"])

	out = stream or sys.stdout

	logger.info(f"Running {args.command} with seed {args.seed}")

	try:
		if args.command == "tweets":
			run_tweets(args, config, out)
		else:
			run_snakes(args, config, out)

	except (chainwalk.errors.ChainwalkError, OSError) as exc:
		logger.error(str(exc))
		return 1

	return 0


if __name__ == "__main__":
	sys.exit(main())
