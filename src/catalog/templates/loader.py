import yaml
from pathlib import Path

TEMPLATES_DIR = Path(__file__).resolve().parent
DEFAULT_CATALOG = TEMPLATES_DIR / "garments.yaml"

def load_templates(path: Path = DEFAULT_CATALOG) -> dict:
    """Raw template definitions keyed by garment type, in file order."""
    p = Path(path)
    if not p.exists():
        available = [x.name for x in TEMPLATES_DIR.glob("*.yaml")]
        raise FileNotFoundError(
            f"No garment catalog found at {p}. "
            f"Available: {available}"
        )
    return yaml.safe_load(p.read_text(encoding="utf-8")) or {}
