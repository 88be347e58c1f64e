"""Assinatura ECDSA-SHA256 das requisições à API."""

from __future__ import annotations

import base64
import binascii

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from .keys import load_public_key


def sign_message(private_key: ec.EllipticCurvePrivateKey, message: str) -> str:
    """Assina a mensagem e retorna a assinatura DER em base64."""
    signature = private_key.sign(message.encode("utf-8"), ec.ECDSA(hashes.SHA256()))
    return base64.b64encode(signature).decode("utf-8")


def verify_signature(message: str, signature_b64: str, public_key_pem: str) -> bool:
    """Valida assinatura base64 (DER) contra a chave pública PEM.

    Returns:
        True se assinatura válida
    """
    public_key = load_public_key(public_key_pem)
    try:
        signature = base64.b64decode(signature_b64, validate=True)
        public_key.verify(signature, message.encode("utf-8"), ec.ECDSA(hashes.SHA256()))
    except (InvalidSignature, ValueError, binascii.Error):
        return False
    return True
