# hdnav/settings.py
import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from .models.address import FilesystemDefault

DEFAULTS = {
    "browser": {"engine": None},  # None => default_engine
    "shell": {"origin": "http://localhost:8080", "home": None},
    "filesystem": {"url": None},  # hd:// address opened when nothing else is asked for
    "tab": {"prefix_style": None},
    "log_level": "INFO",
}

def _config_path() -> Path:
    base = Path.home() / ".config" / "hdnav"
    base.mkdir(parents=True, exist_ok=True)
    return base / "config.json"

def load_settings() -> Dict[str, Any]:
    p = _config_path()
    if not p.exists():
        p.write_text(json.dumps(DEFAULTS, indent=2))
        return copy.deepcopy(DEFAULTS)
    return json.loads(p.read_text())

def save_settings(data: Dict[str, Any]) -> None:
    p = _config_path()
    p.write_text(json.dumps(data, indent=2))

def origin(settings: Dict[str, Any]) -> str:
    value = settings.get("shell", {}).get("origin") or DEFAULTS["shell"]["origin"]
    return value.rstrip("/")

def filesystem_default(settings: Dict[str, Any]) -> Optional[FilesystemDefault]:
    url = settings.get("filesystem", {}).get("url")
    if not url:
        return None
    return FilesystemDefault(url=url)
