"""
Static file hosting.

Serves the configured directory verbatim, except for dotfiles: the key=value
file usually lives in the same directory and must not leak through it.
"""

from pathlib import Path
from typing import Union

from fastapi import HTTPException
from fastapi.staticfiles import StaticFiles
from starlette.types import Scope

PACKAGE_DIR = Path(__file__).resolve().parent

# Landing page shipped with the package
DEFAULT_INDEX = PACKAGE_DIR / "index.html"


def is_hidden(path: str) -> bool:
    """True if any segment of a relative URL path starts with a dot."""
    return any(part.startswith(".") for part in Path(path).parts if part not in ("", "/"))


def landing_page(static_dir: Union[str, Path]) -> Path:
    """index.html from the static directory, or the packaged one."""
    candidate = Path(static_dir) / "index.html"
    if candidate.is_file():
        return candidate
    return DEFAULT_INDEX


class PublicStaticFiles(StaticFiles):
    """StaticFiles that answers 404 for dotfiles and dot-directories."""

    async def get_response(self, path: str, scope: Scope):
        if is_hidden(path):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)
