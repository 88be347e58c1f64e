"""Operações de chave ECDSA (secp256k1) usadas na autenticação."""

from __future__ import annotations

import logging
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from stark_sdk.utils.errors import InvalidKeyError

from .constants import CURVE, CURVE_NAME, PRIVATE_KEY_FILENAME, PUBLIC_KEY_FILENAME

logger = logging.getLogger(__name__)


def load_private_key(private_key_pem: str) -> ec.EllipticCurvePrivateKey:
    """Carrega chave privada ECDSA em formato PEM.

    Args:
        private_key_pem: Chave privada em formato PEM (SEC1 ou PKCS8)

    Returns:
        Chave privada na curva secp256k1

    Raises:
        InvalidKeyError: Se a chave é inválida ou de outra curva/algoritmo
    """
    if not private_key_pem or not private_key_pem.strip():
        raise InvalidKeyError("private_key não pode ser vazia")

    try:
        key = serialization.load_pem_private_key(
            private_key_pem.strip().encode("utf-8"),
            password=None,
        )
    except (ValueError, TypeError) as exc:
        raise InvalidKeyError(f"private_key inválida: {exc}") from exc

    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise InvalidKeyError("private_key deve ser uma chave ECDSA")
    if key.curve.name != CURVE_NAME:
        raise InvalidKeyError(f"private_key deve usar a curva {CURVE_NAME}, não {key.curve.name}")
    return key


def load_public_key(public_key_pem: str) -> ec.EllipticCurvePublicKey:
    """Carrega chave pública ECDSA em formato PEM."""
    try:
        key = serialization.load_pem_public_key(public_key_pem.strip().encode("utf-8"))
    except (ValueError, TypeError) as exc:
        raise InvalidKeyError(f"public_key inválida: {exc}") from exc

    if not isinstance(key, ec.EllipticCurvePublicKey) or key.curve.name != CURVE_NAME:
        raise InvalidKeyError(f"public_key deve ser ECDSA {CURVE_NAME}")
    return key


def public_key_pem(private_key: ec.EllipticCurvePrivateKey) -> str:
    """Serializa a chave pública correspondente em PEM (SubjectPublicKeyInfo)."""
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")


def create_key_pair(path: str | Path | None = None) -> tuple[str, str]:
    """Gera um novo par de chaves secp256k1.

    A chave pública deve ser cadastrada no projeto pela interface web; a
    privada é usada para assinar as requisições.

    Args:
        path: Diretório onde gravar privateKey.pem e publicKey.pem (opcional)

    Returns:
        (private_key_pem, public_key_pem)
    """
    private_key = ec.generate_private_key(CURVE())
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")
    public_pem = public_key_pem(private_key)

    if path is not None:
        directory = Path(path)
        directory.mkdir(parents=True, exist_ok=True)
        (directory / PRIVATE_KEY_FILENAME).write_text(private_pem, encoding="utf-8")
        (directory / PUBLIC_KEY_FILENAME).write_text(public_pem, encoding="utf-8")
        logger.info("stark_key_pair_saved", extra={"directory": str(directory)})

    return private_pem, public_pem
