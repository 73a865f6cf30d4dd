from decimal import Decimal
from typing import List
from catalog.models import RemoteFileHandle, SyncVariant, Template

# Position within a color group's size list, not a size label, selects the tier.
TIER2_INDEX = 4  # 2XL
TIER3_INDEX = 5  # 3XL and up

def price_for_index(template: Template, i: int) -> Decimal:
    price = template.base_price
    # both checks run; at i >= TIER3_INDEX tier3 wins even without a tier2 price
    if i >= TIER2_INDEX and template.tier2_price is not None:
        price = template.tier2_price
    if i >= TIER3_INDEX and template.tier3_price is not None:
        price = template.tier3_price
    return price

def format_price(price: Decimal) -> str:
    return f"{price:.2f}"

def expand(template: Template, file_handle: RemoteFileHandle) -> List[SyncVariant]:
    """
    Build the ordered sync variant list for one design on one template.

    Order is color group order, then size order within the group; the remote
    listing keeps this order. Every variant carries the same file handle.
    """
    variants: List[SyncVariant] = []
    for group in template.color_groups:
        for i, variant_id in enumerate(group.size_variant_ids):
            variants.append(SyncVariant(
                remote_variant_id=variant_id,
                retail_price=format_price(price_for_index(template, i)),
                attached_file=file_handle,
            ))
    return variants

def listing_title(design_name: str, template: Template) -> str:
    return f"{design_name} \u2014 {template.name_suffix}"
