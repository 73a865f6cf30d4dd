import os
import tempfile
from decimal import Decimal

# app.main mounts the uploads dir at import time; keep it out of the repo
os.environ.setdefault("UPLOADS_DIR", tempfile.mkdtemp(prefix="printflow-uploads-"))

import pytest
from catalog.models import ColorGroup, RemoteFileHandle, Template
from catalog.registry import TemplateRegistry
from channels.base import CatalogClient, NetworkError, RemoteAPIError, RemoteProductRecord
from rate_limit.limiter import FixedIntervalGate
from storage.local import LocalAssetStore


class FakeCatalogClient(CatalogClient):
    """In-memory catalog; fails on demand by asset bytes or listing title."""
    name = "fake"

    def __init__(self, fail_ingest=(), fail_titles=(), unreachable=False):
        self.fail_ingest = set(fail_ingest)
        self.fail_titles = set(fail_titles)
        self.unreachable = unreachable
        self.ingested = []
        self.created = []
        self._next_id = 1000

    def ingest_asset(self, data, mime_type):
        if self.unreachable:
            raise NetworkError("POST /files: connection refused")
        if data in self.fail_ingest:
            raise RemoteAPIError(400, "File is not an image")
        self.ingested.append((data, mime_type))
        return RemoteFileHandle(remote_file_id=len(self.ingested), preview_url=f"https://cdn.test/{len(self.ingested)}.png")

    def create_product(self, title, thumbnail_url, variants):
        if self.unreachable:
            raise NetworkError("POST /store/products: connection refused")
        if any(part in title for part in self.fail_titles):
            raise RemoteAPIError(400, f"Invalid product: {title}")
        self._next_id += 1
        self.created.append((title, thumbnail_url, variants))
        return RemoteProductRecord(id=self._next_id, name=title)


@pytest.fixture
def fake_client():
    return FakeCatalogClient()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def gate(sleeps):
    return FixedIntervalGate(0.6, sleep=sleeps.append)


@pytest.fixture
def store(tmp_path):
    return LocalAssetStore(tmp_path / "uploads")


@pytest.fixture
def file_handle():
    return RemoteFileHandle(remote_file_id=77, preview_url="https://cdn.test/77.png")


def make_template(key="tee", base="26.95", tier2="29.95", tier3="32.95", groups=None):
    groups = groups if groups is not None else [("Black", "#0b0b0b", [1, 2, 3, 4, 5, 6, 7])]
    return Template(
        key=key,
        remote_product_id=380,
        name_suffix="Test Tee",
        base_price=Decimal(base),
        tier2_price=Decimal(tier2) if tier2 is not None else None,
        tier3_price=Decimal(tier3) if tier3 is not None else None,
        color_groups=[ColorGroup(color_name=n, color_code=c, size_variant_ids=ids) for n, c, ids in groups],
    )


@pytest.fixture
def small_registry():
    return TemplateRegistry([
        make_template("tee"),
        make_template("hoodie", base="36.75", tier2="38.75", tier3="38.75",
                      groups=[("Black", "#0b0b0b", [11, 12, 13, 14, 15, 16])]),
        make_template("hat", base="24.95", tier2=None, tier3=None,
                      groups=[("Black", "#0b0b0b", [21]), ("White", "#ffffff", [22])]),
    ])
