from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class ColorGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    color_name: str
    color_code: str
    # ordered by garment size, smallest first; position picks the price tier
    size_variant_ids: List[int] = Field(default_factory=list)

class Template(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    remote_product_id: int
    name_suffix: str
    base_price: Decimal
    tier2_price: Optional[Decimal] = None
    tier3_price: Optional[Decimal] = None
    color_groups: List[ColorGroup] = Field(default_factory=list)

    @property
    def variant_count(self) -> int:
        return sum(len(g.size_variant_ids) for g in self.color_groups)

class RemoteFileHandle(BaseModel):
    model_config = ConfigDict(frozen=True)

    remote_file_id: int
    preview_url: str

class SyncVariant(BaseModel):
    remote_variant_id: int
    retail_price: str
    attached_file: RemoteFileHandle
