"""openrouter_client package

Async Python client for the OpenRouter chat completion API.

Purpose:
    Provide a small, stable surface for building chat requests, sending them
    whole or streamed, listing models and managing API keys, with every API
    failure mapped onto one structured error taxonomy.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`OpenRouterClient`, :class:`ClientConfig`,
      :func:`load_client_config`
    - Exceptions: :class:`OpenRouterError`, :class:`DecodingError`,
      :class:`ErrorKind`
    - Data model: requests, messages, responses, streaming deltas, model
      listing and API key types
    - Collaborators: :class:`HTTPExecutor`, :class:`Endpoint`,
      :class:`FragmentStream`
"""

from .base.errors import DecodingError, ErrorKind, ErrorResponse, OpenRouterError
from .base.http import Endpoint, HTTPExecutor, HTTPMethod, RequestBuilder
from .base.models import *  # noqa: F401,F403 - data model re-export
from .base.models import __all__ as _models_all
from .base.streaming import FragmentStream
from .client import OpenRouterClient
from .config import ClientConfig, load_client_config

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "OpenRouterClient",
    "ClientConfig",
    "load_client_config",
    # Exceptions
    "OpenRouterError",
    "DecodingError",
    "ErrorKind",
    "ErrorResponse",
    # Collaborators
    "HTTPExecutor",
    "RequestBuilder",
    "Endpoint",
    "HTTPMethod",
    "FragmentStream",
    # Data model
    *_models_all,
]
