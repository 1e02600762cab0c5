## argvtriage — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# argvtriage — Schema-free classification of command lines into positional args, flags and params.
#

import re
import math
from collections import Counter
from itertools import islice, takewhile
from typing import Iterable

from .types import Mode, ParamMap, DEFAULT_MODE
from .errors import ArgvModeError
from .formatting import show_decision, format_outcome


def trim_leading_dashes(name: str) -> str:
    return name.lstrip('-')

_NUMBER_PREFIX = re.compile(r'\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')

def is_number(arg: str) -> bool:
    """True when the token starts with a finite float literal; trailing text is ignored."""
    if (match := _NUMBER_PREFIX.match(arg)) is None:
        return False
    return math.isfinite(float(match.group()))

def is_option(arg: str) -> bool:
    """Options begin with a dash, unless the token starts as a (negative) number."""
    return arg.startswith('-') and not is_number(arg)


def check_mode(mode: int) -> Mode:
    mode = Mode(mode)
    if mode.is_contradictory:
        raise ArgvModeError("Cannot prefer both flag and param for unregistered options.", mode=mode)
    return mode


def read_args(args: Iterable[str | None], argc: int | None = None) -> list[str]:
    # Accepts both argv shapes: counted via `argc`, or terminated by a `None` entry.
    tokens = takewhile(lambda a: a is not None, args)
    if argc is not None:
        tokens = islice(tokens, max(argc, 0))
    return [str(t) for t in tokens]


def classify(args: Iterable[str], registered: Iterable[str] = (), mode: int = DEFAULT_MODE,
             *, argc: int | None = None, verbosity: int = 0) -> tuple[list[str], Counter, ParamMap]:
    """Walk the tokens once, left to right, with one token of lookahead.

    Returns fresh `(positional, flags, params)` collections; never raises for any token content.
    """
    mode = check_mode(mode)
    registered = registered if isinstance(registered, (set, frozenset)) else set(registered)
    prefer_param = bool(mode & Mode.PREFER_PARAM_FOR_UNREG_OPTION)
    split_equals = not (mode & Mode.NO_SPLIT_ON_EQUALSIGN)
    multiflag = bool(mode & Mode.SINGLE_DASH_IS_MULTIFLAG)

    tokens = read_args(args, argc)
    positional: list[str] = []
    flags: Counter = Counter()
    params = ParamMap()

    def _trace(step, token, kind, name='', value=None):
        if verbosity > 0: show_decision(step, token, format_outcome(kind, name, value))

    i = 0
    while i < len(tokens):
        token = tokens[i]
        step, i = i, i + 1

        if not is_option(token):
            positional.append(token)
            _trace(step, token, 'positional')
            continue

        name = trim_leading_dashes(token)

        if split_equals and '=' in name:
            key, value = name.split('=', 1)
            params.add(key, value)
            _trace(step, token, 'param', key, value)
            continue

        # Single-dash cluster of one-letter flags, possibly ending with a registered param.
        if multiflag and len(token) - len(name) == 1 and name and name not in registered:
            cluster, name = (name[:-1], name[-1]) if name[-1] in registered else (name, None)
            for ch in cluster:
                flags[ch] += 1
                _trace(step, token, 'flag', ch)
            if name is None:
                continue

        # The next token is only a candidate value if it is not itself an option.
        if i == len(tokens) or is_option(tokens[i]):
            flags[name] += 1
            _trace(step, token, 'flag', name)
            continue

        if name in registered or prefer_param:
            params.add(name, tokens[i])
            _trace(step, token, 'param', name, tokens[i])
            i += 1
        else:
            flags[name] += 1
            _trace(step, token, 'flag', name)

    return positional, flags, params
