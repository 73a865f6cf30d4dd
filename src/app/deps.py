from functools import lru_cache
from catalog.registry import TemplateRegistry, load_registry
from channels.printful import PrintfulClient
from rate_limit.limiter import Limiter, get_limiter
from storage.local import LocalAssetStore

# FastAPI dependencies; tests swap them through app.dependency_overrides.

@lru_cache(maxsize=1)
def get_printful_client() -> PrintfulClient:
    return PrintfulClient.from_env()

@lru_cache(maxsize=1)
def get_store() -> LocalAssetStore:
    return LocalAssetStore.from_env()

def get_registry() -> TemplateRegistry:
    return load_registry()

def get_bulk_limiter() -> Limiter:
    return get_limiter("printful")

def get_inspect_limiter() -> Limiter:
    return get_limiter("printful-inspect")
