## argvtriage — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import sys
from collections import Counter

from .types import ParamMap


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_token(token: str) -> str:
    # Quote only when the raw token would be hard to read back.
    if token == '' or any(ch.isspace() or ch in '"\'' for ch in token):
        return '"' + token.replace('"', '\\"') + '"'
    return token

def format_outcome(kind: str, name: str, value: str | None = None) -> str:
    match kind:
        case 'positional':
            return "\033[37mpositional\033[0m"
        case 'flag':
            return f"\033[33mflag\033[0m `\033[1;97m{name}\033[0m`"
        case 'param':
            return f"\033[36mparam\033[0m `\033[1;97m{name}\033[0m` = {format_token(value)}"
    raise NotImplementedError(kind)

def show_decision(step: int, token: str, outcome: str, file=None) -> None:
    print(f"\033[90m{step:>3} :\033[0m  {format_token(token):<24} \033[36m=>\033[0m {outcome}", file=file or sys.stdout)


def format_flags(flags: Counter) -> str:
    items = []
    for name in sorted(flags):
        count = flags[name]
        items.append(format_token(name) + (f"\033[90m×{count}\033[0m" if count > 1 else ''))
    return ' '.join(items) if items else '∅'

def format_params(params: ParamMap) -> str:
    items = [f"{format_token(k)}={format_token(v)}" for k, v in params.items()]
    return ' '.join(items) if items else '∅'

def format_positional(positional: list[str]) -> str:
    return ' '.join(format_token(p) for p in positional) if positional else '∅'

def format_results(positional: list[str], flags: Counter, params: ParamMap) -> str:
    rows = [('POSITIONAL.', format_positional(positional)),
            ('FLAGS.', format_flags(flags)),
            ('PARAMS.', format_params(params))]
    return '\n'.join(f"\033[97m\033[48;5;30m {title:<11} \033[0m {body}" for title, body in rows)
