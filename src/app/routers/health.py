import os
from fastapi import APIRouter, Depends
from channels.base import CatalogError
from channels.printful import PrintfulClient
from app.deps import get_printful_client

router = APIRouter()

@router.get("/status")
def status(client: PrintfulClient = Depends(get_printful_client)):
    if not client.configured:
        return {"ok": False, "error": "PRINTFUL_TOKEN not set"}
    # /store/products only needs the product read scope
    try:
        products = client.list_products()
    except CatalogError as exc:
        return {"ok": False, "error": str(exc)}
    store_name = os.getenv("PRINTFUL_STORE_NAME", "Court Sportswear")
    return {"ok": True, "store": {"name": store_name, "products": len(products)}}
