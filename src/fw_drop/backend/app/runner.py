import subprocess
import sys
from pathlib import Path

from fw_drop.backend.app.core import settings


def server_url() -> str:
    if settings.PUBLIC_BASE_URL:
        return settings.PUBLIC_BASE_URL.rstrip("/")
    # wildcard binds are reachable locally under localhost
    host = "localhost" if settings.HOST in ("", "0.0.0.0", "::") else settings.HOST
    return f"http://{host}:{settings.PORT}"


def run():
    pkg_dir = Path(__file__).resolve().parent
    main_path = pkg_dir / "main.py"
    if not main_path.exists():
        raise FileNotFoundError(f"No main.py found in {main_path}")

    api_cmd = [
        sys.executable,
        "-m", "uvicorn",
        "fw_drop.backend.app.main:app",
        "--host", settings.HOST,
        "--port", str(settings.PORT),
        "--log-level", settings.LOG_LEVEL,
    ]

    print(f"Server running on {server_url()}")
    print(f"Upload directory: {Path(settings.UPLOAD_DIR).resolve()}")
    api_proc = subprocess.Popen(api_cmd)
    return api_proc
