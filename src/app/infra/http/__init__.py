"""Cliente HTTP base compartilhado pelos adapters de infraestrutura."""

from .client import HttpClient, HttpClientConfig, HttpError

__all__ = ["HttpClient", "HttpClientConfig", "HttpError"]
