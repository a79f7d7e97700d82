"""Run configuration loaded from an optional YAML file.

Example ``config.yaml``:

	```yaml
	logging:
	  level: DEBUG
	text:
	  max_length: 25
	  words_to_read: 1000
	board:
	  max_length: 80
	```

Keys that are absent keep their defaults.
"""

import copy
import logging
import os
import typing

import yaml


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"

LOG_LEVELS: typing.Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULTS: typing.Dict[str, typing.Dict[str, typing.Any]] = {
	"logging": {
		"level": "WARNING",
	},
	"text": {
		"max_length": 20,
		"words_to_read": None,
	},
	"board": {
		"max_length": 60,
	},
}


def merge (base: dict, override: dict) -> dict:

	"""
	Return ``base`` with ``override`` laid over it, recursing into dicts.
	"""

	merged = copy.deepcopy(base)

	for key, value in override.items():

		if isinstance(value, dict) and isinstance(merged.get(key), dict):
			merged[key] = merge(merged[key], value)

		else:
			merged[key] = value

	return merged


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file, falling back to defaults.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return copy.deepcopy(DEFAULTS)

	with open(config_path, 'r') as f:
		loaded = yaml.safe_load(f) or {}

	if not isinstance(loaded, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping")

	return validate(merge(DEFAULTS, loaded))


def _positive_int (value: typing.Any, key: str) -> int:

	if isinstance(value, bool) or not isinstance(value, int) or value < 1:
		raise ValueError(f"{key} must be a positive integer, got {value!r}")

	return value


def validate (config: dict) -> dict:

	"""
	Check and normalise a merged config, returning it.

	Raises:
		ValueError: If a section is not a mapping, the logging level is
			unknown, or a length or word limit is out of range.
	"""

	for section in DEFAULTS:
		if not isinstance(config.get(section), dict):
			raise ValueError(f"Config section {section} must be a mapping")

	level = str(config["logging"]["level"]).upper()

	if level not in LOG_LEVELS:
		raise ValueError(f"Unknown logging level {config['logging']['level']!r}")

	config["logging"]["level"] = level

	_positive_int(config["text"]["max_length"], "text.max_length")
	_positive_int(config["board"]["max_length"], "board.max_length")

	words_to_read = config["text"]["words_to_read"]

	if words_to_read is not None:
		if isinstance(words_to_read, bool) or not isinstance(words_to_read, int) or words_to_read < 0:
			raise ValueError(f"text.words_to_read must be a non-negative integer, got {words_to_read!r}")

	return config
