import enum


class SplitOptions(enum.Enum):
    """Whether zero-length pieces survive a split."""

    KEEP_EMPTY = 0
    REMOVE_EMPTY = 1


class WordSplitOptions(enum.Flag):
    """The rules used to find words in a name.

    Rules are combined with ``|`` and always run in declaration order:
    underscores, then camel case, then acronyms.
    """

    NONE = 0
    SPLIT_UNDERSCORE = 1
    SPLIT_CAMEL_CASE = 2
    SPLIT_ACRONYMS = 4
    ALL = SPLIT_UNDERSCORE | SPLIT_CAMEL_CASE | SPLIT_ACRONYMS


class CapitalizationOptions(enum.Enum):
    """The capitalization applied to the words of the output name."""

    PRESERVE_ORIGINAL = 0
    ALL_LOWERCASE = 1
    ALL_UPPERCASE = 2
    CAMEL_CASE = 3
    PASCAL_CASE = 4
    CAMEL_CASE_WITH_ACRONYMS = 5
    PASCAL_CASE_WITH_ACRONYMS = 6


__all__ = ["SplitOptions", "WordSplitOptions", "CapitalizationOptions"]
