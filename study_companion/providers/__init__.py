"""Provider abstraction over live LLM backends and the deterministic mock."""

from .client import (
    ProviderClient,
    ProviderErr,
    ProviderErrorKind,
    ProviderKind,
    ProviderOk,
    ProviderResult,
    resolve_with_fallback,
    select_provider,
)
from .mock import mock_response

__all__ = [
    "ProviderClient",
    "ProviderErr",
    "ProviderErrorKind",
    "ProviderKind",
    "ProviderOk",
    "ProviderResult",
    "mock_response",
    "resolve_with_fallback",
    "select_provider",
]
