"""Criptografia da autenticação da API (ECDSA secp256k1 + SHA-256).

Toda requisição é assinada com a chave privada do usuário; a API valida com
a chave pública previamente cadastrada. `signature.verify_signature` faz a
mesma checagem localmente, para conferir um par gerado por `create_key_pair`.
"""

from .constants import CURVE_NAME
from .keys import create_key_pair, load_private_key, public_key_pem
from .signature import sign_message

__all__ = [
    "CURVE_NAME",
    "create_key_pair",
    "load_private_key",
    "public_key_pem",
    "sign_message",
]
