from loguru import logger
from pipeline.deps import PipelineDeps
from pipeline.state import BatchState, BatchItemError

def check_asset_node(state: BatchState, deps: PipelineDeps) -> BatchState:
    design = state.current
    state.file_handle = None
    if deps.store.exists(design.asset_id):
        state.stage = "pending"
        return state
    logger.warning(f"{design.design_name}: local file {design.asset_id!r} not found")
    state.errors.append(BatchItemError(design_name=design.design_name, message="File not found"))
    state.stage = "asset_missing"
    return state
