from collections import OrderedDict
from typing import Dict, Iterable, Optional, Type, Union

from django.utils.encoding import force_str
from django.utils.functional import Promise
from djangorestframework_camel_case.util import is_iterable
from rest_framework.renderers import JSONRenderer
from rest_framework.utils.serializer_helpers import ReturnDict

from .resolver import StandardNameResolver

default_resolver = StandardNameResolver()


def rename_object(
        data: Union[Type[Promise], Dict, Iterable, str],
        resolver: Optional[StandardNameResolver] = None,
        **options,
):
    """Recursively rename the string keys of ``data`` with ``resolver``."""
    resolver = resolver or default_resolver
    ignore_fields = options.get("ignore_fields") or ()
    # Handle lazy translated strings.
    if isinstance(data, Promise):
        data = force_str(data)
    if isinstance(data, dict):
        if isinstance(data, ReturnDict):
            new_dict = ReturnDict(serializer=data.serializer)
        else:
            new_dict = OrderedDict()
        for key, value in data.items():
            if isinstance(key, Promise):
                key = force_str(key)
            new_key = resolver(key) if isinstance(key, str) else key
            if key not in ignore_fields and new_key not in ignore_fields:
                new_dict[new_key] = rename_object(value, resolver, **options)
            else:
                new_dict[key] = value
        return new_dict
    if is_iterable(data) and not isinstance(data, (str, bytes)):
        return [rename_object(item, resolver, **options) for item in data]
    return data


class StandardJSONRenderer(JSONRenderer):
    """JSON renderer writing every key in its wire form."""

    resolver: StandardNameResolver = default_resolver
    ignore_fields: Iterable[str] = ()

    def render(self, data, accepted_media_type=None, renderer_context=None):
        return super().render(
            rename_object(
                data, self.resolver, ignore_fields=self.ignore_fields
            ),
            accepted_media_type,
            renderer_context,
        )


__all__ = ["rename_object", "StandardJSONRenderer"]
