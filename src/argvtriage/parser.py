## argvtriage — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# argvtriage — Schema-free classification of command lines into positional args, flags and params.
#

import sys
from collections import Counter
from typing import Any, Iterable, Iterator

from .types import Mode, ParamMap, ParamRange, DEFAULT_MODE
from .classifier import classify, trim_leading_dashes
from .values import ValueHandle, render_default


_MISSING = object()


def _names(names: str | Iterable[str]) -> list[str]:
    return [names] if isinstance(names, str) else list(names)


class Parser:
    """Owns the classified command line and offers read-only accessors over it.

    `parser[name]` tests a flag, `parser[i]` reads a positional string (or "" when missing),
    and `parser(name_or_index, default)` returns a `ValueHandle` to convert to a typed value.
    """

    def __init__(self, args: Iterable[str] | None = None, mode: int = DEFAULT_MODE,
                 params: str | Iterable[str] = ()):
        self._registered: set[str] = set()
        self._pos_args: list[str] = []
        self._flags: Counter = Counter()
        self._params = ParamMap()

        self.add_params(params)
        if args is not None:
            self.parse(args, mode)

    # Registration ────────────────────────────────────────────────────────────────────────────
    def add_param(self, names: str | Iterable[str]) -> None:
        for name in _names(names):
            self._registered.add(trim_leading_dashes(name))

    add_params = add_param

    @property
    def registered(self) -> frozenset[str]:
        return frozenset(self._registered)

    # Parsing ─────────────────────────────────────────────────────────────────────────────────
    def parse(self, args: Iterable[str] | None = None, mode: int = DEFAULT_MODE,
              *, argc: int | None = None, verbosity: int = 0) -> "Parser":
        args = sys.argv if args is None else args
        # Collections are rebuilt then swapped together, readers never see a partial parse.
        self._pos_args, self._flags, self._params = classify(
            args, self._registered, mode, argc=argc, verbosity=verbosity)
        return self

    # Collections ─────────────────────────────────────────────────────────────────────────────
    # Whole collections are handed out as copies; changing them never touches the parse result.
    @property
    def flags(self) -> Counter:
        return Counter(self._flags)

    @property
    def pos_args(self) -> list[str]:
        return list(self._pos_args)

    def params(self, name: str | None = None) -> ParamMap | ParamRange:
        if name is None:
            return ParamMap(self._params.items())
        return ParamRange(self._params, trim_leading_dashes(name))

    def __iter__(self) -> Iterator[str]:
        return iter(self._pos_args)

    def __len__(self) -> int:
        return len(self._pos_args)

    # Accessors ───────────────────────────────────────────────────────────────────────────────
    def flag(self, *names: str) -> bool:
        return any(trim_leading_dashes(n) in self._flags for n in names)

    def pos(self, index: int) -> str:
        if 0 <= index < len(self._pos_args):
            return self._pos_args[index]
        return ''

    def param(self, names: str | Iterable[str], default: Any = _MISSING) -> ValueHandle:
        for name in _names(names):
            if (value := self._params.first(trim_leading_dashes(name))) is not None:
                return ValueHandle(value)
        return self._fallback(default)

    def value(self, index: int, default: Any = _MISSING) -> ValueHandle:
        if 0 <= index < len(self._pos_args):
            return ValueHandle(self._pos_args[index])
        return self._fallback(default)

    def _fallback(self, default: Any) -> ValueHandle:
        if default is _MISSING:
            return ValueHandle.failed()
        return ValueHandle(render_default(default))

    def __getitem__(self, key):
        if isinstance(key, int) and not isinstance(key, bool):
            return self.pos(key)
        if isinstance(key, str):
            return self.flag(key)
        return self.flag(*key)

    def __call__(self, key, default: Any = _MISSING) -> ValueHandle:
        if isinstance(key, int) and not isinstance(key, bool):
            return self.value(key, default)
        return self.param(key, default)

    def __repr__(self):
        return f"Parser(pos_args={self._pos_args!r}, flags={sorted(self._flags.elements())!r}, params={self._params!r})"
