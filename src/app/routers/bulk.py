from typing import List, Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from catalog.registry import TemplateRegistry
from channels.printful import PrintfulClient
from pipeline.errors import BatchValidationError
from pipeline.graph import run_batch
from pipeline.state import DesignAsset
from rate_limit.limiter import Limiter
from storage.local import LocalAssetStore
from app.deps import get_bulk_limiter, get_printful_client, get_registry, get_store

router = APIRouter(prefix="/api", tags=["bulk"])

class BulkCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    designs: Optional[List[DesignAsset]] = None
    product_types: Optional[List[str]] = Field(default=None, alias="productTypes")

@router.post("/bulk-create")
def bulk_create(
    req: BulkCreateRequest,
    client: PrintfulClient = Depends(get_printful_client),
    registry: TemplateRegistry = Depends(get_registry),
    store: LocalAssetStore = Depends(get_store),
    limiter: Limiter = Depends(get_bulk_limiter),
):
    try:
        report = run_batch(
            req.designs,
            req.product_types,
            client=client,
            registry=registry,
            store=store,
            limiter=limiter,
        )
    except BatchValidationError as exc:
        return JSONResponse(status_code=400, content={"ok": False, "error": str(exc)})
    # partial failure still answers 200; callers read errors/summary
    return {"ok": True, **report.model_dump(by_alias=True)}
