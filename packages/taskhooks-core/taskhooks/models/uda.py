"""
User defined attributes (UDA).

Every key of an exported task that is not one of the fixed task fields ends
up here. Values keep the kind of JSON token they were read from: strings stay
strings, plain non-negative integers stay ints, everything else numeric
becomes a float.
"""

from collections.abc import MutableMapping
from typing import Dict, Iterator, Optional, Union

from taskhooks.errors import UnsupportedUDAValueError

UDAValue = Union[str, int, float]

# Largest integer taskwarrior-side tooling treats as an exact integer
U64_MAX = 2**64 - 1


def sniff_uda_value(name: str, value: object) -> UDAValue:
    """
    Convert a decoded JSON scalar into a UDA value.

    Args:
        name: Attribute name (used in error messages)
        value: Value as produced by json.loads

    Returns:
        str, int (0 <= n <= U64_MAX) or float

    Raises:
        UnsupportedUDAValueError: For booleans, null, objects and arrays,
            and for integers too large for a float
    """
    # bool is a subclass of int, check it first
    if isinstance(value, bool) or value is None:
        raise UnsupportedUDAValueError(name, value)
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        if 0 <= value <= U64_MAX:
            return value
        try:
            return float(value)
        except OverflowError:
            raise UnsupportedUDAValueError(name, value, "number is out of range") from None
    if isinstance(value, float):
        return value
    raise UnsupportedUDAValueError(name, value)


class UDA(MutableMapping):
    """
    Mapping of attribute name to UDA value.

    Iteration is always in key order so re-exported JSON is diff-stable.
    """

    def __init__(self, data: Optional[Dict[str, UDAValue]] = None, **kwargs: UDAValue):
        self._data: Dict[str, UDAValue] = {}
        if data:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    def __getitem__(self, name: str) -> UDAValue:
        return self._data[name]

    def __setitem__(self, name: str, value: UDAValue) -> None:
        if not isinstance(name, str):
            raise TypeError(f"UDA names must be strings, got {type(name).__name__}")
        self._data[name] = sniff_uda_value(name, value)

    def __delitem__(self, name: str) -> None:
        del self._data[name]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UDA):
            return self._data == other._data
        if isinstance(other, dict):
            return self._data == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"UDA({dict(self.items())!r})"

    def insert(self, name: str, value: UDAValue) -> None:
        """Add or replace an attribute."""
        self[name] = value

    def is_empty(self) -> bool:
        return not self._data

    def to_dict(self) -> Dict[str, UDAValue]:
        """Plain dict in key order."""
        return {name: self._data[name] for name in self}
