"""Constantes criptográficas da autenticação da API."""

from cryptography.hazmat.primitives.asymmetric import ec

CURVE_NAME = "secp256k1"
CURVE = ec.SECP256K1
PRIVATE_KEY_FILENAME = "privateKey.pem"
PUBLIC_KEY_FILENAME = "publicKey.pem"
