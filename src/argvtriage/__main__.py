## argvtriage — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# argvtriage — Schema-free classification of command lines into positional args, flags and params.
#

import os
import sys
from dataclasses import dataclass

import click

from .types import Mode
from .errors import ArgvModeError
from .parser import Parser
from .formatting import write_without_ansi, format_results


@dataclass(frozen=True)
class RuntimeConfig:
    mode: Mode
    params: tuple[str, ...]
    verbose: int
    plain: bool


def _env_params() -> tuple[str, ...]:
    return tuple(p for p in os.environ.get("ARGVTRIAGE_PARAMS", "").split(os.pathsep) if p)


class TriageRunner:
    def __init__(self, config: RuntimeConfig):
        self.config = config

        if config.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        self.parser = Parser(params=config.params + _env_params())

    def run(self, tokens: tuple[str, ...]) -> int:
        try:
            self.parser.parse(tokens, self.config.mode, verbosity=self.config.verbose)
        except ArgvModeError as exc:
            raise click.BadParameter(str(exc), param_hint="'--mode'") from None

        if self.config.verbose: print()
        p = self.parser
        print(format_results(p.pos_args, p.flags, p.params()))
        return 0


@click.command(context_settings={'ignore_unknown_options': True, 'allow_extra_args': True})
@click.option('--mode', '-m', 'modes', multiple=True, type=click.Choice([m.name for m in Mode], case_sensitive=False),
              help='Classification mode bit; repeat to combine.')
@click.option('--param', '-P', 'params', multiple=True, help='Register a name that always expects a value.')
@click.option('--verbose', '-v', default=0, count=True, help='Trace each classification decision.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from the output.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, modes: tuple[str, ...], params: tuple[str, ...], verbose: int, plain: bool, tokens: tuple[str, ...]) -> None:
    """Classify TOKENS into positional arguments, flags and parameters.

    Put `--` before the tokens so options meant for classification are not read here.
    """
    config = RuntimeConfig(mode=Mode.from_names(modes), params=params, verbose=verbose, plain=plain)
    runner = TriageRunner(config)
    ctx.exit(runner.run(tokens))


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='argvtriage')


if __name__ == "__main__":
    main()
