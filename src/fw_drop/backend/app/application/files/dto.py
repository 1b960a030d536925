from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO


@dataclass(frozen=True)
class UploadFileInputDTO:
    filename: str
    stream: BinaryIO
    content_type: str


@dataclass(frozen=True)
class GetStoredFileInputDTO:
    filename: str


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class StoredFileDTO:
    filename: str
    storage_path: str
    size_bytes: int
    content_type: str


@dataclass(frozen=True)
class LocatedFileDTO:
    filename: str
    path: Path
