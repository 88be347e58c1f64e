"""Workspaces (contas) de uma organização."""

from stark_sdk.resources.workspace.operations import RESOURCE, create, get, page, query

__all__ = ["RESOURCE", "create", "get", "page", "query"]
