"""Settings for is-checker, read from the environment and .env files.

Load order (first wins):
  1. OS environment variables.
  2. The .env file at --env-file (if explicitly provided).
  3. A .env file found walking up from cwd, stopping at .git (file or dir).

Unlike a dotenv loader, nothing is written back into os.environ: the merged
values are only used to build a Config.

Keys:
  IS_CHECKER_LOG_LEVEL   logging level name (default WARNING)
  IS_CHECKER_OUTPUT      'text' or 'json' (default text)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

PREFIX = 'IS_CHECKER_'
OUTPUT_FORMATS = ('text', 'json')


@dataclass(frozen=True)
class Config:
    log_level: str = 'WARNING'
    output: str = 'text'
    env_path: Path | None = None  # the .env file that was read, if any

    @property
    def log_level_number(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def find_env_file(start: Path) -> Path | None:
    """Return the nearest .env at or above start, never crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def read_env_file(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are dropped, comments skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        if key.strip():
            values[key.strip()] = value.strip().strip('"').strip("'")
    return values


def load_config(env_file: str | None = None, environ: Mapping[str, str] | None = None) -> Config:
    """Build a Config from the environment plus the applicable .env file."""
    environ = os.environ if environ is None else environ

    path = Path(env_file) if env_file else find_env_file(Path.cwd())
    from_file = read_env_file(path) if path is not None and path.is_file() else {}
    merged = {**from_file, **{k: v for k, v in environ.items() if k.startswith(PREFIX)}}

    output = merged.get(f'{PREFIX}OUTPUT', 'text').lower()
    if output not in OUTPUT_FORMATS:
        output = 'text'

    return Config(
        log_level=merged.get(f'{PREFIX}LOG_LEVEL', 'WARNING').upper(),
        output=output,
        env_path=path if from_file else None,
    )
