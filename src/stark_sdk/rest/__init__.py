"""Camada REST genérica: paginação, requisições assinadas e (de)serialização."""

from stark_sdk.rest.api import ResourceSpec, endpoint, last_name, last_name_plural
from stark_sdk.rest.generator import ResourceStream
from stark_sdk.rest.rest import (
    delete_id,
    get_content,
    get_id,
    get_list,
    get_page,
    get_subresource,
    patch_id,
    post,
    post_single,
)

__all__ = [
    "ResourceSpec",
    "ResourceStream",
    "delete_id",
    "endpoint",
    "get_content",
    "get_id",
    "get_list",
    "get_page",
    "get_subresource",
    "last_name",
    "last_name_plural",
    "patch_id",
    "post",
    "post_single",
]
