import errno
import json
import logging
import os
from typing import Any, List, Optional

from .exceptions import InvalidConfiguration
from .options import CapitalizationOptions, WordSplitOptions
from .resolver import StandardNameResolver
from .strategies import NamingStrategyRegistry, screaming_snake_case

logger = logging.getLogger(__package__)

FLAG_SEPARATORS = ("|", ",")
BOOLEANS = {"true": True, "false": False}
QUOTES = "'\"`"


class NotEnoughCLIArguments(InvalidConfiguration):
    pass


def parse_bool(value: Any, name: str = "value") -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in BOOLEANS:
        return BOOLEANS[value.strip().lower()]
    raise InvalidConfiguration(
        f"{name} should be true or false, got {value!r}", name=name, value=value
    )


class ConfigBuilder:
    """Layered settings: in-memory dicts, JSON files, environment and CLI.

    Later sources override earlier ones, nested dicts are merged.
    Environment variables look like ``z__naming__wordDelimiter=-``; quote a
    value to keep surrounding whitespace, e.g. ``z__naming__wordDelimiter="' '"``.
    """

    __delimiter = "__"
    __env_marker = "z__"

    def __init__(
            self,
            parse_text=True,
            parse_quoted_strings=True,
            base_path="./",
    ):
        self._config = {}
        self._base_path = base_path
        self._parse_text = parse_text
        self._parse_quoted_strings = parse_quoted_strings

    def _add_value(self, entries: list, value: str):
        *parents, leaf = entries
        section = self._config
        for position, entry in enumerate(parents):
            section = section.setdefault(entry, {})
            if not isinstance(section, dict):
                path = ".".join(parents[:position + 1])
                raise InvalidConfiguration(
                    f"Can't nest {'.'.join(entries)} under the value at {path}",
                    path=path,
                )
        section[leaf] = self._parse_value(value)

    def _parse_value(self, value: str):
        text = value.strip()
        if not text:
            # whitespace only, e.g. a single space used as a delimiter
            return value
        if not self._parse_text:
            return text

        if text.lower() in BOOLEANS:
            return BOOLEANS[text.lower()]

        try:
            return json.loads(text)
        except json.JSONDecodeError:
            pass

        if self._parse_quoted_strings and len(text) > 1 and text[0] in QUOTES:
            return text.strip(text[0])
        return text

    def set_base_path(self, path):
        self._base_path = path

    def _merge(self, target: dict, source: dict) -> dict:
        for key, value in source.items():
            current = target.get(key)
            if isinstance(value, dict) and isinstance(current, dict):
                value = self._merge(current, value)
            target[key] = value
        return target

    def add_in_memory_collection(self, obj: dict):
        self._merge(self._config, obj)
        return self

    def add_json_file(self, file, abs_path=False):
        if not abs_path:
            file = os.path.join(self._base_path, file)

        if not os.path.isfile(file):
            raise FileNotFoundError(
                errno.ENOENT, os.strerror(errno.ENOENT), file
            )

        logger.debug(f"Loading naming settings from {file}")
        with open(file, "r", encoding="utf-8") as fh:
            return self.add_in_memory_collection(json.load(fh))

    def add_environment_variables(self, environ=None):
        environ = os.environ if environ is None else environ
        marker = self.__env_marker
        for name, value in environ.items():
            if name.startswith(marker):
                self._add_value(name[len(marker):].split(self.__delimiter), value)
        return self

    def add_command_line(self, args: list):
        if len(args) < 3:
            raise NotEnoughCLIArguments(f"Not enough CLI arguments: {args}")

        for option, value in zip(args[1::2], args[2::2]):
            self._add_value(str(option).lstrip("-").split(self.__delimiter), value)
        return self

    def _read_value(self, path: str, default=None, delimiter="."):
        node = self._config
        for entry in path.split(delimiter):
            if not isinstance(node, dict) or node.get(entry) is None:
                return default
            node = node[entry]
        return node

    def read_value(
            self,
            path: str,
            default: Optional[Any] = None,
            delimiter: str = ".",
            lookup_prefixes: Optional[List] = None,
    ):
        """Look ``path`` up under each prefix in turn, then on its own."""
        for prefix in lookup_prefixes or []:
            lookup_path = path if prefix is None else f"{prefix}{delimiter}{path}"
            value = self._read_value(lookup_path, delimiter=delimiter)
            if value is not None:
                return value

        return self._read_value(path, default=default, delimiter=delimiter)

    @property
    def config(self):
        return self._config


def _option_name(value: str) -> str:
    # "CamelCaseWithAcronyms", "camel_case_with_acronyms" and
    # "CAMEL_CASE_WITH_ACRONYMS" all name the same member
    return screaming_snake_case(value.strip())


def parse_word_split_options(value: Any) -> WordSplitOptions:
    if isinstance(value, WordSplitOptions):
        return value
    if isinstance(value, int):
        try:
            return WordSplitOptions(value)
        except ValueError as err:
            raise InvalidConfiguration(
                f"Invalid word split options {value}", value=value
            ) from err
    if isinstance(value, str):
        for separator in FLAG_SEPARATORS:
            value = value.replace(separator, " ")
        value = value.split()
    if not isinstance(value, (list, tuple)):
        raise InvalidConfiguration(
            f"Invalid word split options {value}", value=value
        )

    options = WordSplitOptions.NONE
    for name in value:
        try:
            options |= WordSplitOptions[_option_name(name)]
        except (KeyError, AttributeError) as err:
            raise InvalidConfiguration(
                f"Unknown word split option {name}", value=name
            ) from err
    return options


def parse_capitalization_options(value: Any) -> CapitalizationOptions:
    if isinstance(value, CapitalizationOptions):
        return value
    try:
        if isinstance(value, int):
            return CapitalizationOptions(value)
        return CapitalizationOptions[_option_name(value)]
    except (KeyError, ValueError, AttributeError) as err:
        raise InvalidConfiguration(
            f"Unknown capitalization option {value}", value=value
        ) from err


def resolver_from_config(
        builder: ConfigBuilder, path: str = "naming"
) -> StandardNameResolver:
    """Build a resolver from the ``path`` section of the settings.

    Either ``strategy`` names a registered resolver, or the explicit
    ``wordSplitOptions``, ``capitalizationOptions``, ``wordDelimiter`` and
    ``acronymAbsorbsNext`` keys override the defaults.
    """
    strategy = builder.read_value(f"{path}.strategy")
    if strategy is not None:
        logger.debug(f"Using naming strategy {strategy}")
        return NamingStrategyRegistry.get(strategy)

    section = builder.read_value(path, default={})
    if not isinstance(section, dict):
        raise InvalidConfiguration(
            f"Naming settings at {path} should be a mapping", path=path
        )

    kwargs = {}
    if "wordSplitOptions" in section:
        kwargs["word_split_options"] = parse_word_split_options(
            section["wordSplitOptions"]
        )
    if "capitalizationOptions" in section:
        kwargs["capitalization_options"] = parse_capitalization_options(
            section["capitalizationOptions"]
        )
    if "wordDelimiter" in section:
        delimiter = section["wordDelimiter"]
        kwargs["word_delimiter"] = None if delimiter is None else str(delimiter)
    if "acronymAbsorbsNext" in section:
        kwargs["acronym_absorbs_next"] = parse_bool(
            section["acronymAbsorbsNext"], "acronymAbsorbsNext"
        )

    return StandardNameResolver(**kwargs)


__all__ = [
    "ConfigBuilder",
    "NotEnoughCLIArguments",
    "parse_bool",
    "parse_word_split_options",
    "parse_capitalization_options",
    "resolver_from_config",
]
