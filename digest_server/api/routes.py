"""
API routes for the digest server.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel

from digest_server import __version__
from digest_server.config import Settings, get_settings
from digest_server.envfile import read_env_file
from digest_server.static import landing_page

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class TokenResponse(BaseModel):
    """Token lookup response."""
    token: str


class EnvInfoResponse(BaseModel):
    """Configuration file status."""
    hasEnvFile: bool
    hasToken: bool
    message: str


# =============================================================================
# Health Check
# =============================================================================

@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": __version__
    }


# =============================================================================
# Token
# =============================================================================

def lookup_token(settings: Settings) -> Optional[str]:
    """Current token value, or None if the file or key is missing or empty."""
    env_vars = read_env_file(settings.env_file_path)
    if not env_vars:
        return None
    return env_vars.get(settings.token_key) or None


@router.get("/api/token", response_model=TokenResponse)
async def get_token(settings: Settings = Depends(get_settings)):
    """Return the token from the env file."""
    token = lookup_token(settings)
    if token is None:
        file_name = settings.env_file_path.name
        return JSONResponse(
            status_code=404,
            content={
                "error": f"{settings.token_key} not found in {file_name} file",
                "message": f"Please create a {file_name} file with {settings.token_key}=your_token_here"
            }
        )

    return {"token": token}


@router.get("/api/env-info", response_model=EnvInfoResponse)
async def get_env_info(settings: Settings = Depends(get_settings)):
    """Report whether the env file and the token are present."""
    file_name = settings.env_file_path.name
    env_vars = read_env_file(settings.env_file_path)

    if env_vars is None:
        return {
            "hasEnvFile": False,
            "hasToken": False,
            "message": f"No {file_name} file found"
        }

    has_token = bool(env_vars.get(settings.token_key))
    return {
        "hasEnvFile": True,
        "hasToken": has_token,
        "message": (
            f"Token found in {file_name} file" if has_token
            else f"{settings.token_key} not found in {file_name} file"
        )
    }


# =============================================================================
# Landing Page
# =============================================================================

@router.get("/", include_in_schema=False)
async def index(settings: Settings = Depends(get_settings)):
    """Serve the landing page."""
    return FileResponse(landing_page(settings.static_path))
