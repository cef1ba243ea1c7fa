# config.py
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_PORT = 3000
DEFAULT_HOST = '127.0.0.1'
ROOT_SEARCH_STEPS = 6

def find_project_root(start=None, max_steps=ROOT_SEARCH_STEPS):
    """Walk upward from `start` until a directory holding data/ and data/bible/ is found.

    Falls back to `start` (the working directory by default) when nothing
    matches within `max_steps` parents.
    """
    start = Path(start or os.getcwd()).resolve()
    current = start
    for _ in range(max_steps + 1):
        if (current / 'data').is_dir() and (current / 'data' / 'bible').is_dir():
            return current
        if current.parent == current:
            break
        current = current.parent
    logger.info(f"No data/bible directory found above {start}, using it as project root")
    return start

def resolve_port(cli_value=None):
    """Port priority: command-line flag, then PORT env var, then the default."""
    for value in (cli_value, os.getenv('PORT')):
        if value is None or str(value).strip() == '':
            continue
        try:
            port = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid port: {value!r}")
        if not 0 < port < 65536:
            raise ValueError(f"Port out of range: {port}")
        return port
    return DEFAULT_PORT

def _env_path(name, default, root):
    value = os.getenv(name)
    if not value:
        return default
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path

class Config:
    SEARCH_DEFAULT_LIMIT = 25
    SEARCH_MAX_LIMIT = 500
    PREVIEW_CHARS = 90

    @classmethod
    def from_env(cls, start=None):
        root = find_project_root(start)
        return {
            'PROJECT_ROOT': root,
            'BIBLE_DIR': _env_path('BIBLE_DIR', root / 'data' / 'bible', root),
            'PUBLIC_DIR': _env_path('PUBLIC_DIR', root / 'public', root),
            'HOST': os.getenv('HOST', DEFAULT_HOST),
            'PORT': resolve_port(),
            'SEARCH_DEFAULT_LIMIT': cls.SEARCH_DEFAULT_LIMIT,
            'SEARCH_MAX_LIMIT': int(os.getenv('SEARCH_MAX_LIMIT', cls.SEARCH_MAX_LIMIT)),
            'PREVIEW_CHARS': cls.PREVIEW_CHARS,
            'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO').upper(),
        }
