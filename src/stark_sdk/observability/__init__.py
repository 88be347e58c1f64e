"""Observabilidade: request_id propagado para os logs estruturados."""

from stark_sdk.observability.request_id import (
    generate_request_id,
    get_request_id,
    reset_request_id,
    set_request_id,
)

__all__ = [
    "generate_request_id",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
]
