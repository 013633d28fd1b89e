"""HTTP package: endpoint descriptors, request building and execution."""

from .client import create_async_client
from .endpoint import Endpoint, HTTPMethod, QueryParams
from .request_builder import RequestBuilder
from .executor import HTTPExecutor

__all__ = [
    "create_async_client",
    "Endpoint",
    "HTTPMethod",
    "QueryParams",
    "RequestBuilder",
    "HTTPExecutor",
]
