"""
Parser for `.env` style files.

Format: one KEY=VALUE per line, `#` starts a comment line, blank lines are
ignored. Only the first `=` separates key from value, so values may contain
`=` themselves. The file is read from scratch on every call.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

EnvVars = Dict[str, str]

COMMENT_PREFIX = "#"
SEPARATOR = "="


def parse_env_content(content: str) -> EnvVars:
    """
    Parse key=value text into a dict.

    Lines without a separator, or with nothing before it, are skipped.
    A repeated key keeps its last value.
    """
    env_vars: EnvVars = {}

    for line in content.split("\n"):
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        key, sep, value = line.partition(SEPARATOR)
        if not key or not sep:
            continue

        env_vars[key.strip()] = value.strip()

    return env_vars


def read_env_file(path: Union[str, Path]) -> Optional[EnvVars]:
    """
    Read and parse the file at `path`.

    Returns None if the file does not exist or cannot be read.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8-sig", errors="replace")
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as e:
        logger.error(f"Error reading env file {path}: {e}")
        return None

    return parse_env_content(content)
