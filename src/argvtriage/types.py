## argvtriage — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import bisect
from enum import IntFlag
from typing import Iterable, Iterator


class Mode(IntFlag):
    PREFER_FLAG_FOR_UNREG_OPTION = 1 << 0
    PREFER_PARAM_FOR_UNREG_OPTION = 1 << 1
    NO_SPLIT_ON_EQUALSIGN = 1 << 2
    SINGLE_DASH_IS_MULTIFLAG = 1 << 3

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "Mode":
        """Combine members by name, case-insensitive; no names gives the default mode."""
        mode = cls(0)
        for name in names:
            mode |= cls[name.upper().replace('-', '_')]
        return mode or cls.PREFER_FLAG_FOR_UNREG_OPTION

    @property
    def is_contradictory(self) -> bool:
        both = Mode.PREFER_FLAG_FOR_UNREG_OPTION | Mode.PREFER_PARAM_FOR_UNREG_OPTION
        return (self & both) == both


DEFAULT_MODE = Mode.PREFER_FLAG_FOR_UNREG_OPTION


class ParamMap:
    """Multi-valued mapping of parameter name to value strings.

    Keys iterate in sorted order, values under one key in insertion order, so the
    first value of a key is the first one added.  `len()` counts (key, value) pairs.
    """

    __slots__ = ('_keys', '_values')

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()):
        self._keys: list[str] = []
        self._values: dict[str, list[str]] = {}
        for key, value in pairs:
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        if key not in self._values:
            bisect.insort(self._keys, key)
            self._values[key] = []
        self._values[key].append(value)

    def first(self, key: str, default: str | None = None) -> str | None:
        values = self._values.get(key)
        return values[0] if values else default

    def getall(self, key: str) -> list[str]:
        return list(self._values.get(key, ()))

    def count(self, key: str) -> int:
        return len(self._values.get(key, ()))

    def keys(self) -> list[str]:
        return list(self._keys)

    def items(self) -> Iterator[tuple[str, str]]:
        for key in self._keys:
            for value in self._values[key]:
                yield key, value

    def to_dict(self) -> dict[str, list[str]]:
        return {key: list(self._values[key]) for key in self._keys}

    def __iter__(self):
        return self.items()

    def __contains__(self, key) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return sum(len(v) for v in self._values.values())

    def __eq__(self, other):
        if isinstance(other, ParamMap):
            return self._values == other._values
        if isinstance(other, dict):
            return self.to_dict() == {k: v if isinstance(v, list) else [v] for k, v in other.items()}
        return NotImplemented

    def __repr__(self):
        return f"ParamMap({list(self.items())!r})"


class ParamRange:
    """Lazy view over all values stored under one name; iterating it twice restarts."""

    __slots__ = ('_map', '_key')

    def __init__(self, params: ParamMap, key: str):
        self._map = params
        self._key = key

    @property
    def name(self) -> str:
        return self._key

    def __iter__(self) -> Iterator[str]:
        yield from self._map._values.get(self._key, ())

    def __len__(self) -> int:
        return self._map.count(self._key)

    def __getitem__(self, index: int) -> str:
        return self._map._values.get(self._key, [])[index]

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self):
        return f"ParamRange({self._key!r}: {list(self)!r})"
