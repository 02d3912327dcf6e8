"""
API key resolution and authentication headers.

Resolves API keys from multiple sources:
1. Explicit value
2. Environment variable (OPENAI_API_KEY)
3. System keyring (optional ``keyring`` extra)
"""

from __future__ import annotations

import os

API_KEY_ENV = "OPENAI_API_KEY"

_KEYRING_SERVICE = "openai-lite"


def resolve_api_key(explicit_key: str | None = None) -> str | None:
    """Resolve the API key.

    Resolution order:
    1. Explicit key if provided
    2. ``OPENAI_API_KEY`` environment variable
    3. System keyring (if available)

    Args:
        explicit_key: Explicitly provided API key

    Returns:
        Resolved API key or None if not found
    """
    if explicit_key:
        return explicit_key

    key = os.getenv(API_KEY_ENV)
    if key:
        return key

    return _try_keyring()


def _try_keyring() -> str | None:
    """Try to get the API key from the system keyring."""
    try:
        import keyring
    except ImportError:
        # keyring not installed
        return None

    try:
        return keyring.get_password(_KEYRING_SERVICE, "api_key")
    except Exception:
        # Keyring backend errors are common in containers and CI
        return None


def get_auth_headers(api_key: str, organization: str = "") -> dict[str, str]:
    """Get authentication headers for a request.

    Args:
        api_key: Bearer credential
        organization: Organization identifier; the header is only sent when set

    Returns:
        Dictionary with authentication header(s)
    """
    headers = {"Authorization": f"Bearer {api_key}"}
    if organization:
        headers["OpenAI-Organization"] = organization
    return headers
