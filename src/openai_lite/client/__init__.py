"""
Client module - public entry point, builder and cancellation.
"""

from openai_lite.client.builder import ClientBuilder
from openai_lite.client.cancel import CancelReason, CancelToken
from openai_lite.client.core import Client

__all__ = [
    "CancelReason",
    "CancelToken",
    "Client",
    "ClientBuilder",
]
