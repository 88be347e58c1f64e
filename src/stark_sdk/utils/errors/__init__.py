"""Exceções compartilhadas do SDK."""

from .exceptions import (
    ApiError,
    ApiInputError,
    DeserializationError,
    InternalServerError,
    InvalidInputError,
    InvalidKeyError,
    InvalidUserError,
    ResourceNotFoundError,
    StarkSdkError,
    TransportError,
    UnknownApiError,
)

__all__ = [
    "ApiError",
    "ApiInputError",
    "DeserializationError",
    "InternalServerError",
    "InvalidInputError",
    "InvalidKeyError",
    "InvalidUserError",
    "ResourceNotFoundError",
    "StarkSdkError",
    "TransportError",
    "UnknownApiError",
]
