"""Operações por recurso da API.

Uso:
    from stark_sdk.resources import boleto

    for item in boleto.query(context, {"limit": 10, "status": "paid"}):
        print(item.id)
"""

from stark_sdk.resources import boleto, invoice, workspace

__all__ = ["boleto", "invoice", "workspace"]
