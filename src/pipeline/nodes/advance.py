from pipeline.deps import PipelineDeps
from pipeline.state import BatchState

def advance_node(state: BatchState, deps: PipelineDeps) -> BatchState:
    state.cursor += 1
    state.stage = "pending"
    state.file_handle = None
    return state
