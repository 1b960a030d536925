import asyncio
import io
from pathlib import Path

import pytest

from fw_drop.backend.app.domain.files import FileStorage, FileTooLarge
from fw_drop.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage


pytestmark = pytest.mark.asyncio


async def _save(storage: FilesystemFileStorage, filename: str, content: bytes):
    return await storage.save(
        filename=filename,
        stream=io.BytesIO(content),
        content_type="application/octet-stream",
    )


async def test_matches_file_storage_protocol(upload_dir: Path):
    assert isinstance(FilesystemFileStorage(upload_dir), FileStorage)


async def test_first_save_creates_directory(upload_dir: Path):
    storage = FilesystemFileStorage(upload_dir)
    assert not upload_dir.exists()

    stored = await _save(storage, "firmware.bin", b"\xde\xad\xbe\xef")

    assert upload_dir.is_dir()
    assert (upload_dir / "firmware.bin").read_bytes() == b"\xde\xad\xbe\xef"
    assert stored.storage_path == "firmware.bin"
    assert stored.size_bytes == 4


async def test_existing_directory_is_reused(upload_dir: Path):
    upload_dir.mkdir()
    (upload_dir / "old.bin").write_bytes(b"old")
    storage = FilesystemFileStorage(upload_dir)

    await _save(storage, "new.bin", b"new")

    assert sorted(p.name for p in upload_dir.iterdir()) == ["new.bin", "old.bin"]


async def test_last_write_wins(upload_dir: Path):
    storage = FilesystemFileStorage(upload_dir)

    await _save(storage, "firmware.bin", b"first version, longer")
    stored = await _save(storage, "firmware.bin", b"second")

    assert (upload_dir / "firmware.bin").read_bytes() == b"second"
    assert stored.size_bytes == 6
    assert len(list(upload_dir.iterdir())) == 1


async def test_large_stream_is_copied_completely(upload_dir: Path):
    storage = FilesystemFileStorage(upload_dir)
    content = bytes(range(256)) * 1024

    stored = await _save(storage, "big.bin", content)

    assert stored.size_bytes == len(content)
    assert (upload_dir / "big.bin").read_bytes() == content


async def test_size_limit_aborts_and_leaves_partial_file(upload_dir: Path):
    storage = FilesystemFileStorage(upload_dir, max_bytes=10)

    with pytest.raises(FileTooLarge):
        await _save(storage, "big.bin", b"x" * 100)

    partial = upload_dir / "big.bin"
    assert partial.exists()
    assert partial.stat().st_size <= 10


async def test_save_fails_when_directory_path_is_a_file(upload_dir: Path):
    upload_dir.write_bytes(b"not a directory")
    storage = FilesystemFileStorage(upload_dir)

    with pytest.raises(OSError):
        await _save(storage, "firmware.bin", b"abc")


async def test_original_name_is_used_verbatim(upload_dir: Path):
    storage = FilesystemFileStorage(upload_dir)

    stored = await _save(storage, "../outside.bin", b"abc")

    # known gap: parent references are not stripped
    assert (upload_dir.parent / "outside.bin").read_bytes() == b"abc"
    assert stored.storage_path == "../outside.bin"


async def test_locate(upload_dir: Path):
    storage = FilesystemFileStorage(upload_dir)
    assert await storage.locate(filename="firmware.bin") is None

    await _save(storage, "firmware.bin", b"abc")
    (upload_dir / "nested").mkdir()

    assert await storage.locate(filename="firmware.bin") == upload_dir / "firmware.bin"
    assert await storage.locate(filename="nested") is None
    assert await storage.locate(filename="missing.bin") is None


async def test_locate_sees_out_of_band_changes(upload_dir: Path):
    storage = FilesystemFileStorage(upload_dir)
    await _save(storage, "firmware.bin", b"abc")

    (upload_dir / "firmware.bin").unlink()
    (upload_dir / "manual.bin").write_bytes(b"dropped in by hand")

    assert await storage.locate(filename="firmware.bin") is None
    assert await storage.locate(filename="manual.bin") == upload_dir / "manual.bin"


async def test_concurrent_saves_of_distinct_names(upload_dir: Path):
    storage = FilesystemFileStorage(upload_dir)
    a = b"a" * 200_000
    b = b"b" * 150_000

    await asyncio.gather(_save(storage, "a.bin", a), _save(storage, "b.bin", b))

    assert (upload_dir / "a.bin").read_bytes() == a
    assert (upload_dir / "b.bin").read_bytes() == b
