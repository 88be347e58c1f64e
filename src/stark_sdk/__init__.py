"""Cliente Python para a API REST do Stark Bank.

Uso:
    from stark_sdk import Project, boleto, create_context

    project = Project(environment="sandbox", id="5656565656565656", private_key=pem)
    with create_context(project) as context:
        for item in boleto.query(context, {"limit": 5}):
            print(item.id, item.status)
"""

from stark_sdk.config.settings import SDK_VERSION, ApiSettings
from stark_sdk.context import StarkContext, create_context
from stark_sdk.domain import Organization, Project
from stark_sdk.infra.crypto import create_key_pair
from stark_sdk.resources import boleto, invoice, workspace
from stark_sdk.rest import ResourceStream

__version__ = SDK_VERSION

__all__ = [
    "ApiSettings",
    "Organization",
    "Project",
    "ResourceStream",
    "StarkContext",
    "__version__",
    "boleto",
    "create_context",
    "create_key_pair",
    "invoice",
    "workspace",
]
