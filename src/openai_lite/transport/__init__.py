"""
Transport layer - HTTP client for API communication.

Provides httpx-based transport with:
- Header merging and bearer authentication
- Failure classification into typed errors
- Per-call cancellation
- API key resolution
"""

from openai_lite.transport.auth import get_auth_headers, resolve_api_key
from openai_lite.transport.http import ACCEPT, HttpTransport

__all__ = [
    "ACCEPT",
    "HttpTransport",
    "get_auth_headers",
    "resolve_api_key",
]
