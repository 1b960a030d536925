from dataclasses import dataclass


@dataclass
class StoredFileInfo:
    filename: str
    storage_path: str
    size_bytes: int
    content_type: str
