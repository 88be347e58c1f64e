"""Operações de Workspace: create, get, query, page."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stark_sdk import rest
from stark_sdk.domain.resource import build_model
from stark_sdk.domain.user import Organization
from stark_sdk.domain.workspace import Workspace, WorkspaceQuery
from stark_sdk.rest.api import ResourceSpec
from stark_sdk.utils.errors import InvalidUserError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from stark_sdk.context import StarkContext
    from stark_sdk.rest.generator import ResourceStream

RESOURCE = ResourceSpec(model=Workspace, name="Workspace")


def create(
    context: StarkContext,
    workspace: Workspace | Mapping[str, Any],
) -> Workspace:
    """Cria um workspace. Exige Organization sem workspace_id no contexto.

    Raises:
        InvalidUserError: Se o usuário do contexto não é uma Organization
    """
    user = context.user
    if not isinstance(user, Organization) or user.workspace_id:
        raise InvalidUserError("Workspace.create exige uma Organization sem workspace_id")
    return rest.post_single(context, RESOURCE, build_model(Workspace, workspace))


def get(context: StarkContext, id: str) -> Workspace:
    return rest.get_id(context, RESOURCE, id)


def query(
    context: StarkContext,
    filters: WorkspaceQuery | Mapping[str, Any] | None = None,
) -> ResourceStream[Workspace]:
    """Itera workspaces. Sem filtros, uma Organization recebe todos os seus.

    Filtros: limit, username, ids.
    """
    return rest.get_list(context, RESOURCE, build_model(WorkspaceQuery, filters))


def page(
    context: StarkContext,
    filters: WorkspaceQuery | Mapping[str, Any] | None = None,
    cursor: str | None = None,
) -> tuple[list[Workspace], str | None]:
    return rest.get_page(context, RESOURCE, build_model(WorkspaceQuery, filters), cursor)
