from typing import Callable, List, Optional, Sequence
from langgraph.graph import StateGraph, END
from loguru import logger
from catalog.registry import TemplateRegistry
from channels.base import CatalogClient
from rate_limit.limiter import Limiter
from storage.local import LocalAssetStore
from .deps import PipelineDeps
from .errors import BatchValidationError
from .state import BatchState, BatchReport, BatchSummary, DesignAsset
from .nodes.resolve_types import resolve_types_node
from .nodes.check_asset import check_asset_node
from .nodes.ingest import ingest_node
from .nodes.create_products import create_products_node
from .nodes.advance import advance_node

# resolve_types, then at most check_asset -> ingest -> create_products -> advance per design
_STEPS_PER_DESIGN = 4

def _bind(node: Callable[[BatchState, PipelineDeps], BatchState], deps: PipelineDeps):
    def run(state: BatchState) -> BatchState:
        return node(state, deps)
    run.__name__ = node.__name__
    return run

def _next_design(state: BatchState) -> str:
    return "check_asset" if state.has_next else END

def _after_check(state: BatchState) -> str:
    return "ingest" if state.stage == "pending" else "advance"

def _after_ingest(state: BatchState) -> str:
    return "create_products" if state.stage == "ingested" else "advance"

def build_graph(deps: PipelineDeps):
    g = StateGraph(BatchState)
    g.add_node("resolve_types", _bind(resolve_types_node, deps))
    g.add_node("check_asset", _bind(check_asset_node, deps))
    g.add_node("ingest", _bind(ingest_node, deps))
    g.add_node("create_products", _bind(create_products_node, deps))
    g.add_node("advance", _bind(advance_node, deps))

    g.set_entry_point("resolve_types")
    g.add_conditional_edges("resolve_types", _next_design, {"check_asset": "check_asset", END: END})
    g.add_conditional_edges("check_asset", _after_check, {"ingest": "ingest", "advance": "advance"})
    g.add_conditional_edges("ingest", _after_ingest, {"create_products": "create_products", "advance": "advance"})
    g.add_edge("create_products", "advance")
    g.add_conditional_edges("advance", _next_design, {"check_asset": "check_asset", END: END})

    return g.compile()

def run_batch(
    designs: Sequence[DesignAsset],
    requested_types: Optional[List[str]] = None,
    *,
    client: CatalogClient,
    registry: TemplateRegistry,
    store: LocalAssetStore,
    limiter: Limiter,
) -> BatchReport:
    """
    Publish every design on every requested garment type.

    Failures are collected per item in the report; only an empty design list
    fails the call itself.
    """
    if not designs:
        raise BatchValidationError("No designs provided")

    deps = PipelineDeps(client=client, registry=registry, store=store, limiter=limiter)
    state = BatchState(designs=list(designs), requested_types=list(requested_types or []))
    app = build_graph(deps)
    result = app.invoke(state, {"recursion_limit": _STEPS_PER_DESIGN * len(state.designs) + 10})

    # LangGraph returns a dict of channel values; coerce for attribute access
    final_state = BatchState(**result) if isinstance(result, dict) else result

    report = BatchReport(
        results=final_state.results,
        errors=final_state.errors,
        summary=BatchSummary(created=len(final_state.results), failed=len(final_state.errors)),
    )
    logger.info(f"Bulk create finished: {report.summary.created} created, {report.summary.failed} failed")
    return report
