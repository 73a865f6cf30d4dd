import pytest
from storage.local import LocalAssetMissing, LocalAssetStore, design_name_from, mime_type_for


def test_save_list_delete(tmp_path):
    store = LocalAssetStore(tmp_path, clock_ms=lambda: 1700000000000)
    stored = store.save("summer-vibes_2.png", b"png")

    assert stored.id == "1700000000000-summer-vibes_2.png"
    assert stored.path == "/uploads/1700000000000-summer-vibes_2.png"
    assert stored.design_name == "summer vibes 2"
    assert stored.size == 3
    assert store.exists(stored.id)
    assert store.read_bytes(stored.id) == b"png"

    listed = store.list()
    assert [(a.id, a.design_name) for a in listed] == [(stored.id, "summer vibes 2")]

    store.delete(stored.id)
    assert not store.exists(stored.id)
    with pytest.raises(LocalAssetMissing):
        store.delete(stored.id)


def test_path_components_are_not_asset_ids(tmp_path):
    store = LocalAssetStore(tmp_path / "uploads")
    (tmp_path / "secret.png").write_bytes(b"x")
    assert not store.exists("../secret.png")
    with pytest.raises(LocalAssetMissing):
        store.read_bytes("../secret.png")


def test_design_name_from():
    assert design_name_from("my_cool-design.final.jpg") == "my cool design.final"


@pytest.mark.parametrize("name,mime", [
    ("a.png", "image/png"),
    ("a.PNG", "image/png"),
    ("a.svg", "image/svg+xml"),
    ("a.jpg", "image/jpeg"),
    ("a.jpeg", "image/jpeg"),
])
def test_mime_type_for(name, mime):
    assert mime_type_for(name) == mime
