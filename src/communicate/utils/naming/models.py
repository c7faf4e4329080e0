from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, create_model

from .resolver import StandardNameResolver

default_resolver = StandardNameResolver()


def naming_config(
        resolver: Optional[StandardNameResolver] = None, **extra
) -> ConfigDict:
    """Model config generating wire aliases with ``resolver``.

    Fields stay populatable by their Python names, so the same model reads
    wire payloads and keyword arguments alike.
    """
    return ConfigDict(
        alias_generator=resolver or default_resolver,
        populate_by_name=True,
        **extra,
    )


class StandardModel(BaseModel):
    model_config = naming_config()

    def to_wire(self, **kwargs) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, **kwargs)

    def to_wire_json(self, **kwargs) -> str:
        return self.model_dump_json(by_alias=True, **kwargs)

    @classmethod
    def from_wire(cls, data: Any):
        if isinstance(data, (str, bytes)):
            return cls.model_validate_json(data)
        return cls.model_validate(data)


def create_model_from_dict(
        name: str,
        data: dict,
        resolver: Optional[StandardNameResolver] = None,
) -> Type[StandardModel]:
    """Build a model class whose fields mirror the keys of ``data``."""
    fields = {key: (type(value), value) for key, value in data.items()}
    return create_model(
        name,
        __base__=StandardModel if resolver is None else _base_for(resolver),
        **fields,
    )


def _base_for(resolver: StandardNameResolver) -> Type[StandardModel]:
    class ResolvedModel(StandardModel):
        model_config = naming_config(resolver)

    return ResolvedModel


__all__ = [
    "StandardModel",
    "naming_config",
    "create_model_from_dict",
    "default_resolver",
]
