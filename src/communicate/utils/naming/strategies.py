import logging
from collections import OrderedDict
from typing import List

from .exceptions import InvalidConfiguration
from .options import CapitalizationOptions, WordSplitOptions
from .resolver import StandardNameResolver

logger = logging.getLogger(__package__)

snake_case = StandardNameResolver(
    WordSplitOptions.ALL, CapitalizationOptions.ALL_LOWERCASE, "_"
)
screaming_snake_case = StandardNameResolver(
    WordSplitOptions.ALL, CapitalizationOptions.ALL_UPPERCASE, "_"
)
kebab_case = StandardNameResolver(
    WordSplitOptions.ALL, CapitalizationOptions.ALL_LOWERCASE, "-"
)
camel_case = StandardNameResolver(
    WordSplitOptions.ALL, CapitalizationOptions.CAMEL_CASE, None
)
pascal_case = StandardNameResolver(
    WordSplitOptions.ALL, CapitalizationOptions.PASCAL_CASE, None
)
camel_case_with_acronyms = StandardNameResolver(
    WordSplitOptions.ALL, CapitalizationOptions.CAMEL_CASE_WITH_ACRONYMS, None
)
pascal_case_with_acronyms = StandardNameResolver(
    WordSplitOptions.ALL, CapitalizationOptions.PASCAL_CASE_WITH_ACRONYMS, None
)


class NamingStrategyRegistry:
    """Named resolvers that configuration can refer to."""

    _registry = OrderedDict()

    @classmethod
    def register(cls, name: str, resolver: StandardNameResolver):
        if name in cls._registry:
            logger.info(f"Replacing naming strategy {name}")
        cls._registry[name] = resolver

    @classmethod
    def unregister(cls, name: str):
        cls._registry.pop(name, None)

    @classmethod
    def get(cls, name: str) -> StandardNameResolver:
        try:
            return cls._registry[name]
        except KeyError as err:
            raise InvalidConfiguration(
                f"No such naming strategy {name}",
                strategy=name,
                known=cls.names(),
            ) from err

    @classmethod
    def names(cls) -> List[str]:
        return list(cls._registry)


for _name, _resolver in (
        ("snake_case", snake_case),
        ("screaming_snake_case", screaming_snake_case),
        ("kebab_case", kebab_case),
        ("camel_case", camel_case),
        ("pascal_case", pascal_case),
        ("camel_case_with_acronyms", camel_case_with_acronyms),
        ("pascal_case_with_acronyms", pascal_case_with_acronyms),
):
    NamingStrategyRegistry.register(_name, _resolver)


__all__ = [
    "NamingStrategyRegistry",
    "snake_case",
    "screaming_snake_case",
    "kebab_case",
    "camel_case",
    "pascal_case",
    "camel_case_with_acronyms",
    "pascal_case_with_acronyms",
]
