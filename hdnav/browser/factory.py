# hdnav/browser/factory.py
from .backend import BrowserBackend


def _default_engine() -> str:
    # QtWebEngine ships with PySide6 on every platform
    return "qt"


def get_browser_backend(engine: str | None = None) -> BrowserBackend:
    if engine is None:
        engine = _default_engine()
    engine = engine.lower()
    if engine == "qt":
        from .qt_backend import QTBackend
        return QTBackend()
    raise ValueError(f"Unknown browser engine: {engine}")
