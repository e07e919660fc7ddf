import tomllib
from pathlib import Path
from typing import Any


class RunSettings:
    verbose: bool
    max_steps: int | None

    def __init__(self):
        self.verbose = False
        self.max_steps = None

    def update(
        self,
        verbose: bool | None = None,
        max_steps: int | None = None
    ):
        if verbose is not None:
            if not isinstance(verbose, bool):
                raise ValueError(f'verbose must be a boolean, got {verbose!r}')

            self.verbose = verbose

        if max_steps is not None:
            if not isinstance(max_steps, int) or isinstance(max_steps, bool):
                raise ValueError(f'max_steps must be an integer, got {max_steps!r}')

            if max_steps < 1:
                raise ValueError(f'max_steps must be positive, got {max_steps}')

            self.max_steps = max_steps

        return self

    def load(self, config_path: Path):
        ''' Reads the [simply] table of a TOML file '''
        config: dict[str, Any] = tomllib.loads(config_path.read_text(encoding='utf-8'))
        section = config.get('simply', {})

        if not isinstance(section, dict):
            raise ValueError('[simply] must be a table')

        return self.update(
            verbose=section.get('verbose'),
            max_steps=section.get('max_steps')
        )
