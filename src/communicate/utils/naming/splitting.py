from collections import OrderedDict
from typing import Iterable, List

from .exceptions import InvalidArgument, OutOfRange
from .options import SplitOptions


def _validate_indices(s: str, indices: List[int]):
    last_value = None
    for index in indices:
        if last_value is not None and index < last_value:
            raise InvalidArgument(
                f"The indices must be in ascending order "
                f"(index {index} was after {last_value}).",
                param_name="indices",
                index=index,
                previous=last_value,
            )
        if index < 0 or index > len(s) + 1:
            raise OutOfRange(
                f"The indices must fit the length of the string "
                f"(index {index} is outside of a string with length {len(s)}).",
                param_name="indices",
                index=index,
                length=len(s),
            )
        last_value = index


def split_at_indices(
        s: str,
        indices: Iterable[int],
        options: SplitOptions = SplitOptions.KEEP_EMPTY,
) -> List[str]:
    """Split a string at the given indices.

    :param s: The string to split
    :param indices: Boundaries in ascending order, duplicates allowed
    :param options: Whether zero-length pieces are kept
    :return: The pieces, in order
    """
    if s is None:
        raise InvalidArgument("Value cannot be None.", param_name="s")
    if indices is None:
        raise InvalidArgument("Value cannot be None.", param_name="indices")

    indices = list(indices)
    if not indices:
        return [s]

    _validate_indices(s, indices)

    boundaries = indices + [len(s)]
    remove_empty = options is SplitOptions.REMOVE_EMPTY
    if remove_empty:
        boundaries = list(OrderedDict.fromkeys(boundaries))

    pieces = []
    start = 0
    for end in boundaries:
        # end < start only after an index of len(s) + 1
        if remove_empty and (end == 0 or end < start):
            continue
        pieces.append(s[start:end])
        start = end

    return pieces


__all__ = ["split_at_indices"]
