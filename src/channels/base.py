# src/channels/base.py
from typing import Any, Callable, List, NamedTuple, Optional
from pydantic import BaseModel, ConfigDict
from catalog.models import RemoteFileHandle, SyncVariant

class CatalogError(Exception):
    """Anything that went wrong talking to the remote catalog."""

class NetworkError(CatalogError):
    """Transport failure: DNS, refused/reset connection, timeout, undecodable body."""

class RemoteAPIError(CatalogError):
    def __init__(self, code: int, message: str):
        super().__init__(f"Printful API error: {message}")
        self.code = code
        self.detail = message

class RemoteProductRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int

class CatalogClient:
    """Interface the bulk pipeline needs from a fulfillment catalog."""
    name = "base"

    def ingest_asset(self, data: bytes, mime_type: str) -> RemoteFileHandle:
        raise NotImplementedError

    def create_product(self, title: str, thumbnail_url: str, variants: List[SyncVariant]) -> RemoteProductRecord:
        raise NotImplementedError

class CallResult(NamedTuple):
    ok: bool
    value: Any = None
    error: Optional[CatalogError] = None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

def call_safely(fn: Callable[..., Any], *args, **kwargs) -> CallResult:
    """Run one remote operation and tag the outcome instead of raising."""
    try:
        return CallResult(True, fn(*args, **kwargs))
    except CatalogError as exc:
        return CallResult(False, error=exc)
