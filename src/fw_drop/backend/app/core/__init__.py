from fw_drop.backend.app.core.config import settings
from fw_drop.backend.app.core.deps import get_file_storage

__all__ = ['settings',
           'get_file_storage']
