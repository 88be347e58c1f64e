"""Modelos de Workspace.

Workspaces são contas bancárias com saldo, extrato e permissões
independentes, ligadas a uma organização.
"""

from __future__ import annotations

from pydantic import Field

from stark_sdk.domain.resource import Query, Resource


class Workspace(Resource):
    username: str = Field(..., description="Nome simplificado e único usado na URL.")
    name: str = Field(..., description="Nome completo do workspace.")


class WorkspaceQuery(Query):
    username: str | None = None
    ids: list[str] | None = None
