import sys
from pathlib import Path
import logging as lg

import click

from simply.common.errors import SimplyError, ParseError, StepLimitExceeded
from simply.lang.program import Program, load_file
from simply.runtime.settings import RunSettings
import simply.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_PARSE_ERROR = 1
EXIT_KEYBOARD = 3
EXIT_STEP_LIMIT = 4
EXIT_EXEC_ERROR = 100


def execute(
    program: Program,
    settings: RunSettings | None = None,
    output: cpu.Output | None = None
) -> cpu.CPU:
    if settings is None:
        settings = RunSettings()

    proc = cpu.CPU(program, output, settings.max_steps)
    proc.run()
    return proc


def run_file(filepath: Path, settings: RunSettings | None = None) -> cpu.CPU:
    return execute(load_file(filepath), settings)


def report(error: SimplyError | OSError | UnicodeDecodeError):
    click.echo(f'error: {error}', err=True)


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--max-steps', type=click.IntRange(min=1), help='Fail after this many instructions')
@click.option('-c', '--config', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='TOML file with a [simply] settings table')
@click.argument('script', type=Path)
def run(
    ctx: click.Context,
    script: Path,
    config: Path | None,
    verbose: bool,
    max_steps: int | None
):
    ctx.ensure_object(RunSettings)

    try:
        if config is not None:
            ctx.obj.load(config)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--config')

    # An absent flag leaves the configured value alone
    ctx.obj.update(verbose=verbose or None, max_steps=max_steps)

    lg.basicConfig(level=lg.DEBUG if ctx.obj.verbose else lg.INFO)
    lg.info(f'Running {script}')

    try:
        proc = run_file(script, ctx.obj)
        lg.info(f'Execution halted gracefully after {proc.steps} steps')
        sys.exit(EXIT_HALT)

    except ParseError as e:
        report(e)
        sys.exit(EXIT_PARSE_ERROR)

    except StepLimitExceeded as e:
        report(e)
        sys.exit(EXIT_STEP_LIMIT)

    except SimplyError as e:
        report(e)
        sys.exit(EXIT_EXEC_ERROR)

    except (OSError, UnicodeDecodeError) as e:
        report(e)
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)


if __name__ == '__main__':
    run()
