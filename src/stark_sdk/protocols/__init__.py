"""Protocolos (contratos estruturais) do SDK."""

from stark_sdk.protocols.http_client import HttpClientProtocol

__all__ = ["HttpClientProtocol"]
