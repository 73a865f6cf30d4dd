from dataclasses import dataclass
from catalog.registry import TemplateRegistry
from channels.base import CatalogClient
from rate_limit.limiter import Limiter
from storage.local import LocalAssetStore

@dataclass(frozen=True)
class PipelineDeps:
    client: CatalogClient
    registry: TemplateRegistry
    store: LocalAssetStore
    limiter: Limiter
