from fastapi import APIRouter, Depends
from channels.base import CatalogError
from channels.printful import PrintfulClient
from catalog.detect import detect_templates
from rate_limit.limiter import Limiter
from app.deps import get_inspect_limiter, get_printful_client

router = APIRouter(prefix="/api", tags=["catalog"])

@router.get("/products")
def products(client: PrintfulClient = Depends(get_printful_client)):
    try:
        return {"ok": True, "products": client.list_products()}
    except CatalogError as exc:
        return {"ok": False, "error": str(exc)}

@router.get("/catalog/{product_id}")
def catalog_product(product_id: int, client: PrintfulClient = Depends(get_printful_client)):
    try:
        return {"ok": True, "product": client.get_catalog_product(product_id)}
    except CatalogError as exc:
        return {"ok": False, "error": str(exc)}

@router.get("/detect-templates")
def detect(
    client: PrintfulClient = Depends(get_printful_client),
    limiter: Limiter = Depends(get_inspect_limiter),
):
    try:
        return {"ok": True, "detected": detect_templates(client, limiter)}
    except CatalogError as exc:
        return {"ok": False, "error": str(exc)}
