import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from .exceptions import InvalidArgument
from .options import CapitalizationOptions, SplitOptions, WordSplitOptions
from .splitting import split_at_indices

logger = logging.getLogger(__package__)

UNDERSCORE = "_"
CAMEL_CASE_RE = re.compile(r"[A-Z][^A-Z]+")
ACRONYM_RE = re.compile(r"[A-Z]+(?![^A-Z])")


@dataclass(frozen=True)
class NamingConfig:
    """How a name is split into words and how the words are put back.

    ``acronym_absorbs_next`` keeps the historical acronym boundary, one
    character past the matched run. Turn it off to cut at the run's end.
    """

    word_split_options: WordSplitOptions = WordSplitOptions.ALL
    capitalization_options: CapitalizationOptions = (
        CapitalizationOptions.ALL_LOWERCASE
    )
    word_delimiter: Optional[str] = UNDERSCORE
    acronym_absorbs_next: bool = True


DEFAULT_CONFIG = NamingConfig()


def split_underscore(word: str) -> List[str]:
    """Split on underscores: ``foo_bar`` becomes ``foo``, ``bar``."""
    return [piece for piece in word.split(UNDERSCORE) if piece]


def split_camel_case(word: str) -> List[str]:
    """Split on capitalized letters: ``FooBar`` becomes ``Foo``, ``Bar``."""
    indices = [match.start() for match in CAMEL_CASE_RE.finditer(word)]
    return split_at_indices(word, indices, SplitOptions.REMOVE_EMPTY)


def split_acronyms(word: str, absorb_next: bool = True) -> List[str]:
    """Split on acronyms: ``FOObarBAZ`` becomes ``FOO``, ``bar``, ``BAZ``."""
    indices = []
    for match in ACRONYM_RE.finditer(word):
        end = match.end() + 1 if absorb_next else match.end()
        indices.extend((match.start(), min(end, len(word))))
    return split_at_indices(word, indices, SplitOptions.REMOVE_EMPTY)


def _flat_map(splitter: Callable[[str], List[str]], words: Iterable[str]):
    return [piece for word in words for piece in splitter(word)]


def split_words(identifier: str, config: NamingConfig = DEFAULT_CONFIG):
    """Break an identifier into words using the enabled split rules."""
    if identifier is None:
        raise InvalidArgument("Value cannot be None.", param_name="identifier")

    options = config.word_split_options
    words = [identifier]

    if WordSplitOptions.SPLIT_UNDERSCORE in options:
        words = _flat_map(split_underscore, words)

    if WordSplitOptions.SPLIT_CAMEL_CASE in options:
        words = _flat_map(split_camel_case, words)

    if WordSplitOptions.SPLIT_ACRONYMS in options:
        words = _flat_map(
            lambda word: split_acronyms(word, config.acronym_absorbs_next),
            words,
        )

    return words


def capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def is_acronym(word: str) -> bool:
    return word.upper() == word


def _camel_case(index: int, word: str) -> str:
    return word.lower() if index == 0 else capitalize(word)


CAPITALIZERS: Dict[CapitalizationOptions, Callable[[int, str], str]] = {
    CapitalizationOptions.PRESERVE_ORIGINAL: lambda index, word: word,
    CapitalizationOptions.ALL_LOWERCASE: lambda index, word: word.lower(),
    CapitalizationOptions.ALL_UPPERCASE: lambda index, word: word.upper(),
    CapitalizationOptions.CAMEL_CASE: _camel_case,
    CapitalizationOptions.PASCAL_CASE: lambda index, word: capitalize(word),
    CapitalizationOptions.CAMEL_CASE_WITH_ACRONYMS: (
        lambda index, word: word if is_acronym(word) else _camel_case(index, word)
    ),
    CapitalizationOptions.PASCAL_CASE_WITH_ACRONYMS: (
        lambda index, word: word if is_acronym(word) else capitalize(word)
    ),
}


def capitalize_words(
        words: List[str], options: CapitalizationOptions
) -> List[str]:
    capitalizer = CAPITALIZERS[options]
    return [capitalizer(index, word) for index, word in enumerate(words)]


def resolve_name(
        identifier: str, config: Optional[NamingConfig] = None
) -> str:
    """Translate an identifier into its renamed form.

    :param identifier: Field or property name
    :param config: Split, capitalization and join settings,
        ``DEFAULT_CONFIG`` when omitted
    :return: The words of ``identifier`` recased and joined by the delimiter
    """
    config = config or DEFAULT_CONFIG
    words = split_words(identifier, config)
    words = capitalize_words(words, config.capitalization_options)
    return (config.word_delimiter or "").join(words)


class StandardNameResolver:
    """Naming strategy turning field names into wire property names.

    Instances are callables so they plug into any mapper expecting a
    ``str -> str`` rename function, e.g. a pydantic ``alias_generator``.
    """

    config: NamingConfig

    def __init__(
            self,
            word_split_options: WordSplitOptions = WordSplitOptions.ALL,
            capitalization_options: CapitalizationOptions = (
                CapitalizationOptions.ALL_LOWERCASE
            ),
            word_delimiter: Optional[str] = UNDERSCORE,
            acronym_absorbs_next: bool = True,
    ):
        self.config = NamingConfig(
            word_split_options=word_split_options,
            capitalization_options=capitalization_options,
            word_delimiter=word_delimiter,
            acronym_absorbs_next=acronym_absorbs_next,
        )

    @classmethod
    def from_config(cls, config: NamingConfig) -> "StandardNameResolver":
        return cls(
            word_split_options=config.word_split_options,
            capitalization_options=config.capitalization_options,
            word_delimiter=config.word_delimiter,
            acronym_absorbs_next=config.acronym_absorbs_next,
        )

    @property
    def word_split_options(self) -> WordSplitOptions:
        return self.config.word_split_options

    @property
    def capitalization_options(self) -> CapitalizationOptions:
        return self.config.capitalization_options

    @property
    def word_delimiter(self) -> Optional[str]:
        return self.config.word_delimiter

    def split_words(self, identifier: str) -> List[str]:
        return split_words(identifier, self.config)

    def resolve_name(self, identifier: str) -> str:
        name = resolve_name(identifier, self.config)
        logger.debug(f"Resolved {identifier!r} to {name!r}")
        return name

    def __eq__(self, other):
        if not isinstance(other, StandardNameResolver):
            return NotImplemented
        return self.config == other.config

    def __hash__(self):
        return hash(self.config)

    def __repr__(self):
        return f"{type(self).__name__}({self.config!r})"

    __call__ = resolve_name


__all__ = [
    "NamingConfig",
    "DEFAULT_CONFIG",
    "StandardNameResolver",
    "resolve_name",
    "split_words",
    "split_underscore",
    "split_camel_case",
    "split_acronyms",
    "capitalize_words",
]
