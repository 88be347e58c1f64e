"""Camada HTTP do SDK."""

from .api_errors import ApiErrorDetail, build_api_error, parse_api_errors
from .api_logging import log_api_error, log_success
from .http_base import HttpClient, HttpClientConfig

__all__ = [
    "ApiErrorDetail",
    "HttpClient",
    "HttpClientConfig",
    "build_api_error",
    "log_api_error",
    "log_success",
    "parse_api_errors",
]
