from typing import Any, Dict, List
from loguru import logger
from channels.base import CatalogError
from channels.printful import PrintfulClient
from rate_limit.limiter import Limiter

SAMPLE_SIZE = 5

def detect_templates(client: PrintfulClient, limiter: Limiter, sample_size: int = SAMPLE_SIZE) -> List[Dict[str, Any]]:
    """
    Echo the catalog product, variant count and sample price of the first few
    store products, as a starting point for a new template entry.

    Listing failures propagate; a product whose detail call fails is skipped.
    """
    products = client.list_products()
    detected: List[Dict[str, Any]] = []
    for p in products[:sample_size]:
        try:
            detail = client.get_product(p["id"])
        except CatalogError as exc:
            logger.warning(f"detect-templates: skipping store product {p.get('id')}: {exc}")
            continue
        # pause only after a successful detail fetch
        with limiter():
            sync_product = detail.get("sync_product") or {}
            sync_variants = detail.get("sync_variants") or []
            if sync_variants:
                first = sync_variants[0]
                detected.append({
                    "name": sync_product.get("name"),
                    "printfulProductId": (first.get("product") or {}).get("product_id"),
                    "variantCount": len(sync_variants),
                    "sampleVariantId": first.get("variant_id"),
                    "retailPrice": first.get("retail_price"),
                })
    return detected
