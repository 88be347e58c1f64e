"""Settings de acesso à API Stark Bank.

Valores padrão podem ser sobrescritos por variáveis de ambiente `STARK_*`.
Credenciais NÃO fazem parte destas settings: cada chamada recebe o usuário
explicitamente via StarkContext.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["production", "sandbox"]
Language = Literal["en-US", "pt-BR"]

API_VERSION: str = "v2"
PRODUCTION_URL: str = "https://api.starkbank.com/"
SANDBOX_URL: str = "https://sandbox.api.starkbank.com/"
SDK_VERSION: str = "0.1.0"
MAX_PAGE_SIZE: int = 100


@dataclass(frozen=True)
class ApiSettings:
    """Configurações de acesso HTTP à API.

    Attributes:
        api_version: Versão da API (prefixo do path, ex: v2)
        production_url: URL base do ambiente de produção
        sandbox_url: URL base do ambiente sandbox
        request_timeout_seconds: Timeout por requisição
        language: Idioma das mensagens de erro da API
        page_size: Tamanho máximo de página pedido em listagens
        user_agent: User-Agent enviado em toda requisição
    """

    api_version: str = API_VERSION
    production_url: str = PRODUCTION_URL
    sandbox_url: str = SANDBOX_URL
    request_timeout_seconds: float = 15.0
    language: Language = "en-US"
    page_size: int = MAX_PAGE_SIZE
    user_agent: str = f"stark-sdk-python/{SDK_VERSION}"

    def base_url(self, environment: Environment) -> str:
        """URL base completa com versão para o ambiente informado.

        Returns:
            URL no formato: https://sandbox.api.starkbank.com/v2/
        """
        root = self.production_url if environment == "production" else self.sandbox_url
        return f"{root.rstrip('/')}/{self.api_version}/"

    def validate(self) -> list[str]:
        """Valida configurações.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.request_timeout_seconds <= 0:
            errors.append("STARK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.language not in ("en-US", "pt-BR"):
            errors.append(f"STARK_LANGUAGE inválido: {self.language}")

        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            errors.append(f"STARK_PAGE_SIZE deve estar entre 1 e {MAX_PAGE_SIZE}")

        urls = {
            "STARK_PRODUCTION_URL": self.production_url,
            "STARK_SANDBOX_URL": self.sandbox_url,
        }
        for name, url in urls.items():
            if not url.startswith(("https://", "http://")):
                errors.append(f"{name} deve ser uma URL http(s)")

        return errors


def _parse_language(value: str) -> Language:
    return "pt-BR" if value.lower() in ("pt-br", "pt_br", "pt") else "en-US"


def _load_from_env() -> ApiSettings:
    """Carrega ApiSettings a partir de variáveis de ambiente."""
    return ApiSettings(
        api_version=os.getenv("STARK_API_VERSION", API_VERSION),
        production_url=os.getenv("STARK_PRODUCTION_URL", PRODUCTION_URL),
        sandbox_url=os.getenv("STARK_SANDBOX_URL", SANDBOX_URL),
        request_timeout_seconds=float(os.getenv("STARK_REQUEST_TIMEOUT_SECONDS", "15")),
        language=_parse_language(os.getenv("STARK_LANGUAGE", "en-US")),
        page_size=int(os.getenv("STARK_PAGE_SIZE", str(MAX_PAGE_SIZE))),
    )


@lru_cache(maxsize=1)
def get_api_settings() -> ApiSettings:
    """Retorna instância cacheada de ApiSettings."""
    return _load_from_env()
