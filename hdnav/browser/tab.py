# hdnav/browser/tab.py
import logging
from typing import Callable, Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtCore import Signal

from .backend import BrowserBackend
from ..address_codec import AddressCodec
from ..environment import BrowserEnvironment
from ..models.address import FilesystemDefault
from ..resolver import AddressResolver

logger = logging.getLogger(__name__)


class BrowserTab(QWidget):
    address_changed = Signal(str)
    title_changed = Signal(str)

    def __init__(
        self,
        backend: BrowserBackend,
        origin: str,
        open_tab: Callable[[str], object],
        address: Optional[str] = None,
        filesystem: Optional[FilesystemDefault] = None,
    ):
        super().__init__()
        self.backend = backend
        self.codec = AddressCodec()
        self._view = backend.create_view(self)
        self.environment = BrowserEnvironment(
            backend, self._view, open_tab, origin, filesystem=filesystem
        )
        self.resolver: Optional[AddressResolver] = None
        self._loads = 0

        # every url change is a new load cycle
        backend.on_url_changed(self._view, self._on_url_changed)
        backend.on_title_changed(self._view, self._on_title_changed)
        backend.on_open_requested(self._view, self._on_open_requested)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._view)

        backend.load_url(self._view, self._host_url(address or ""))

    def _host_url(self, address: str) -> str:
        return f"{self.environment.origin()}/{self.codec.strip(address)}"

    def navigate_to(self, address: str):
        """Navigate this tab to a hd:// address (prefix optional)."""
        if self.resolver is not None:
            self.resolver.set_url(address)
        else:
            self.environment.navigate_to(self._host_url(address))

    def open_url(self, address: str):
        if self.resolver is not None:
            self.resolver.open_url(address)
        else:
            self.environment.open_in_new_context(self._host_url(address))

    def current_address(self) -> str:
        """The hd:// address for the address bar, empty before the first load."""
        if self.resolver is None:
            return ""
        return self.resolver.get_url() or ""

    def _on_url_changed(self, url: str):
        logger.debug("View url changed: %s", url)
        self._loads += 1
        load = self._loads
        resolver = AddressResolver(self.environment, self.codec)
        if load != self._loads:
            # resolution navigated and a newer load cycle already took over
            return
        self.resolver = resolver
        self.address_changed.emit(self.current_address())

    def _on_title_changed(self, title: str):
        self.title_changed.emit(title)

    def _on_open_requested(self, url: str):
        prefix = self.environment.origin() + "/"
        if not url.startswith(prefix):
            logger.info("Not opening %s: outside %s", url, self.environment.origin())
            return
        self.open_url(url[len(prefix):])
