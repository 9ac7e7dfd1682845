# hdnav/browser/backend.py
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from PySide6.QtWidgets import QWidget


class BrowserBackend(ABC):
    @abstractmethod
    def create_view(self, parent: Optional["QWidget"] = None) -> "QWidget":
        raise NotImplementedError

    @abstractmethod
    def load_url(self, view: "QWidget", url: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def current_url(self, view: "QWidget") -> str:
        raise NotImplementedError

    @abstractmethod
    def replace_url(self, view: "QWidget", url: str) -> None:
        """Show url for the current page without a new history entry or title change."""
        raise NotImplementedError

    @abstractmethod
    def on_url_changed(self, view: "QWidget", callback: Callable[[str], None]) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_title_changed(self, view: "QWidget", callback: Callable[[str], None]) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_open_requested(self, view: "QWidget", callback: Callable[[str], None]) -> None:
        """callback receives the url the page asked to open in a new window."""
        raise NotImplementedError
