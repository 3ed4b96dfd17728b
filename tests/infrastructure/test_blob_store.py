"""Local Blob Store — writes under root, returns public URLs, rejects escapes."""

import pytest

from marketplace_admin.core.errors import BlobStorageError
from marketplace_admin.infrastructure.blob_store import LocalBlobStore


async def test_upload_writes_bytes_and_returns_url(tmp_path):
    blobs = LocalBlobStore(tmp_path, "https://cdn.example.com/media/")
    url = await blobs.upload("products/p_1_pic.png", b"data")
    assert url == "https://cdn.example.com/media/products/p_1_pic.png"
    assert (tmp_path / "products" / "p_1_pic.png").read_bytes() == b"data"


@pytest.mark.parametrize("path", ["../escape.png", "/etc/passwd", "a/../../b.png", ""])
async def test_paths_cannot_escape_root(tmp_path, path):
    blobs = LocalBlobStore(tmp_path, "http://x")
    with pytest.raises(BlobStorageError):
        await blobs.upload(path, b"data")


async def test_os_errors_become_blob_storage_errors(tmp_path):
    (tmp_path / "taken").write_text("file, not a directory")
    blobs = LocalBlobStore(tmp_path, "http://x")
    with pytest.raises(BlobStorageError):
        await blobs.upload("taken/pic.png", b"data")
