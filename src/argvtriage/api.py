## argvtriage — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable

from .types import Mode, ParamMap, ParamRange, DEFAULT_MODE
from .errors import *
from .classifier import classify, is_option, is_number, trim_leading_dashes
from .values import ValueHandle, render_default
from .parser import Parser

PREFER_FLAG_FOR_UNREG_OPTION = Mode.PREFER_FLAG_FOR_UNREG_OPTION
PREFER_PARAM_FOR_UNREG_OPTION = Mode.PREFER_PARAM_FOR_UNREG_OPTION
NO_SPLIT_ON_EQUALSIGN = Mode.NO_SPLIT_ON_EQUALSIGN
SINGLE_DASH_IS_MULTIFLAG = Mode.SINGLE_DASH_IS_MULTIFLAG


def parse(args: Iterable[str] | None = None, mode: int = DEFAULT_MODE, params: str | Iterable[str] = ()) -> Parser:
    return Parser(params=params).parse(args, mode)
