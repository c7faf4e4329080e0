from .configuration import ConfigBuilder, resolver_from_config
from .exceptions import (
    InvalidArgument,
    InvalidConfiguration,
    NamingException,
    OutOfRange,
)
from .models import StandardModel, create_model_from_dict, naming_config
from .options import CapitalizationOptions, SplitOptions, WordSplitOptions
from .resolver import (
    DEFAULT_CONFIG,
    NamingConfig,
    StandardNameResolver,
    resolve_name,
    split_words,
)
from .splitting import split_at_indices
from .strategies import NamingStrategyRegistry
from .version import __version__

__all__ = (
    "CapitalizationOptions",
    "ConfigBuilder",
    "DEFAULT_CONFIG",
    "InvalidArgument",
    "InvalidConfiguration",
    "NamingConfig",
    "NamingException",
    "NamingStrategyRegistry",
    "OutOfRange",
    "SplitOptions",
    "StandardModel",
    "StandardNameResolver",
    "WordSplitOptions",
    "create_model_from_dict",
    "naming_config",
    "resolve_name",
    "resolver_from_config",
    "split_at_indices",
    "split_words",
    "__version__",
)
