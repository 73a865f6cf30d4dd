from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional
from loguru import logger
from catalog.models import Template
from catalog.templates.loader import DEFAULT_CATALOG, load_templates

class TemplateRegistry:
    """
    Read-only catalog of garment templates keyed by type ("tee", "hoodie", ...).

    Key order is the catalog order and doubles as the default set of types
    for a batch. An unknown key is not an error: lookup() returns None and
    callers skip that type.
    """

    def __init__(self, templates: Iterable[Template]):
        table: Dict[str, Template] = {}
        for t in templates:
            if t.key in table:
                raise ValueError(f"duplicate template key: {t.key}")
            table[t.key] = t
        self._templates = MappingProxyType(table)

    @classmethod
    def from_mapping(cls, raw: dict) -> "TemplateRegistry":
        return cls(Template(key=key, **spec) for key, spec in raw.items())

    def lookup(self, type_key: str) -> Optional[Template]:
        return self._templates.get(type_key)

    def keys(self) -> List[str]:
        return list(self._templates.keys())

    def __contains__(self, type_key: str) -> bool:
        return type_key in self._templates

    def __len__(self) -> int:
        return len(self._templates)

@lru_cache(maxsize=None)
def load_registry(path: Path = DEFAULT_CATALOG) -> TemplateRegistry:
    registry = TemplateRegistry.from_mapping(load_templates(path))
    logger.info(f"Loaded {len(registry)} garment templates: {', '.join(registry.keys())}")
    return registry
