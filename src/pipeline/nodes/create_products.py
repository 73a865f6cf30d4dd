from loguru import logger
from catalog.expansion import expand, listing_title
from channels.base import call_safely
from pipeline.deps import PipelineDeps
from pipeline.state import BatchState, BatchItemError, BatchItemResult

def create_products_node(state: BatchState, deps: PipelineDeps) -> BatchState:
    design = state.current
    handle = state.file_handle
    for type_key in state.type_keys:
        template = deps.registry.lookup(type_key)
        if template is None:
            # unknown types are skipped, not reported
            logger.debug(f"Skipping unknown garment type {type_key!r}")
            continue

        title = listing_title(design.design_name, template)
        with deps.limiter():
            variants = expand(template, handle)
            res = call_safely(deps.client.create_product, title, handle.preview_url, variants)

        if res.ok:
            logger.info(f"Created '{title}' as product {res.value.id} ({len(variants)} variants)")
            state.results.append(BatchItemResult(
                design_name=design.design_name,
                garment_type=type_key,
                remote_product_id=res.value.id,
                name=title,
            ))
        else:
            logger.warning(f"{design.design_name} / {type_key}: {res.message}")
            state.errors.append(BatchItemError(
                design_name=design.design_name,
                garment_type=type_key,
                message=res.message,
            ))
    state.stage = "done"
    return state
