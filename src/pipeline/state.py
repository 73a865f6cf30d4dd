from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional
from catalog.models import RemoteFileHandle

class WireModel(BaseModel):
    # camelCase on the wire, snake_case in code
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class DesignAsset(WireModel):
    asset_id: str = Field(alias="fileId")
    design_name: str

class BatchItemResult(WireModel):
    design_name: str
    garment_type: str
    remote_product_id: int
    name: str
    status: Literal["created"] = "created"

class BatchItemError(WireModel):
    design_name: str
    garment_type: Optional[str] = None
    message: str

class BatchSummary(BaseModel):
    created: int = 0
    failed: int = 0

class BatchReport(BaseModel):
    results: List[BatchItemResult] = Field(default_factory=list)
    errors: List[BatchItemError] = Field(default_factory=list)
    summary: BatchSummary = Field(default_factory=BatchSummary)

# Where the current design stands; routes the graph after each node.
DesignStage = Literal["pending", "asset_missing", "ingest_failed", "ingested", "done"]

class BatchState(BaseModel):
    designs: List[DesignAsset]
    requested_types: List[str] = Field(default_factory=list)
    type_keys: List[str] = Field(default_factory=list)
    cursor: int = 0
    stage: DesignStage = "pending"
    file_handle: Optional[RemoteFileHandle] = None
    results: List[BatchItemResult] = Field(default_factory=list)
    errors: List[BatchItemError] = Field(default_factory=list)

    @property
    def current(self) -> DesignAsset:
        return self.designs[self.cursor]

    @property
    def has_next(self) -> bool:
        return self.cursor < len(self.designs)
