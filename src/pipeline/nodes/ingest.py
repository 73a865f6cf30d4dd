from loguru import logger
from channels.base import call_safely
from pipeline.deps import PipelineDeps
from pipeline.state import BatchState, BatchItemError
from storage.local import LocalAssetMissing, mime_type_for

def ingest_node(state: BatchState, deps: PipelineDeps) -> BatchState:
    """Upload the design once; every garment type of this design reuses the handle."""
    design = state.current
    try:
        data = deps.store.read_bytes(design.asset_id)
    except LocalAssetMissing:
        # removed between the existence check and the read
        state.errors.append(BatchItemError(design_name=design.design_name, message="File not found"))
        state.stage = "asset_missing"
        return state

    res = call_safely(deps.client.ingest_asset, data, mime_type_for(design.asset_id))
    if not res.ok:
        logger.warning(f"{design.design_name}: upload failed: {res.message}")
        state.errors.append(BatchItemError(
            design_name=design.design_name,
            message=f"Upload failed: {res.message}",
        ))
        state.stage = "ingest_failed"
        return state

    state.file_handle = res.value
    state.stage = "ingested"
    return state
