# hdnav/environment.py
import logging
import urllib.parse
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from .browser.backend import BrowserBackend
from .models.address import FilesystemDefault

logger = logging.getLogger(__name__)


class Environment(ABC):
    """The host document as seen by the address resolver.

    Reads happen once per load cycle; the three write operations are
    fire-and-forget requests with no completion callback.
    """

    @abstractmethod
    def displayed_path(self) -> str:
        """Path currently shown to the user, leading '/' included.

        Query and fragment, when the host shows any, follow the path.
        """
        raise NotImplementedError

    @abstractmethod
    def origin(self) -> str:
        raise NotImplementedError

    def filesystem_default(self) -> Optional[FilesystemDefault]:
        return None

    @abstractmethod
    def normalize_displayed_address(self, url: str) -> None:
        """Replace the current history entry with url, keeping the title."""
        raise NotImplementedError

    @abstractmethod
    def navigate_to(self, url: str) -> None:
        """Full navigation: new history entry, page reload."""
        raise NotImplementedError

    @abstractmethod
    def open_in_new_context(self, url: str) -> None:
        raise NotImplementedError


class BrowserEnvironment(Environment):
    """Environment backed by one browser view plus a callback that opens tabs."""

    def __init__(
        self,
        backend: BrowserBackend,
        view: Any,
        open_tab: Callable[[str], Any],
        origin: str,
        filesystem: Optional[FilesystemDefault] = None,
    ):
        self.backend = backend
        self.view = view
        self.open_tab = open_tab
        self._origin = origin.rstrip("/")
        self._filesystem = filesystem

    def displayed_path(self) -> str:
        current = self.backend.current_url(self.view)
        if not current:
            return ""
        parts = urllib.parse.urlsplit(current)
        # query and fragment belong to the hd:// address, keep them
        path = parts.path
        if parts.query:
            path += f"?{parts.query}"
        if parts.fragment:
            path += f"#{parts.fragment}"
        return path

    def origin(self) -> str:
        return self._origin

    def filesystem_default(self) -> Optional[FilesystemDefault]:
        return self._filesystem

    def normalize_displayed_address(self, url: str) -> None:
        logger.debug("Replacing displayed address with %s", url)
        self.backend.replace_url(self.view, url)

    def navigate_to(self, url: str) -> None:
        logger.info("Navigating to %s", url)
        self.backend.load_url(self.view, url)

    def open_in_new_context(self, url: str) -> None:
        logger.info("Opening %s in a new tab", url)
        self.open_tab(url)
