"""Infraestrutura concreta de IO (HTTP, criptografia)."""
