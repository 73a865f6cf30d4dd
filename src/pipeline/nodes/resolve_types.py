from loguru import logger
from pipeline.deps import PipelineDeps
from pipeline.state import BatchState

def resolve_types_node(state: BatchState, deps: PipelineDeps) -> BatchState:
    # empty request means every known garment type, in catalog order
    state.type_keys = list(state.requested_types) or deps.registry.keys()
    logger.info(f"Bulk create: {len(state.designs)} design(s) x types {state.type_keys}")
    return state
