"""Key=value file parsing."""

from digest_server.envfile.parser import EnvVars, parse_env_content, read_env_file

__all__ = [
    "EnvVars",
    "parse_env_content",
    "read_env_file",
]
