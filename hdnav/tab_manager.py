# hdnav/tab_manager.py
import logging
from typing import Optional

from PySide6.QtWidgets import QTabWidget, QWidget, QTabBar

from .browser.factory import get_browser_backend
from .browser.tab import BrowserTab
from . import settings as config

logger = logging.getLogger(__name__)


class TabManager(QTabWidget):
    """
    TabManager keeps a permanent "+" tab at index 0 (no close button).
    Browser tabs are inserted at index 1+ (so plus stays at 0).
    """

    PLUS_LABEL = "+"
    PREFIXES = {
        "long": "Browser - ",
        "short": "B - ",
        "icon": "🌐 ",
    }

    def __init__(self, settings: dict, address_controller=None, parent=None):
        super().__init__(parent)
        self.settings = settings
        self.address_controller = address_controller
        self.backend = get_browser_backend(settings.get("browser", {}).get("engine"))
        self.origin = config.origin(settings)
        self.filesystem = config.filesystem_default(settings)

        self.setTabsClosable(True)
        self.tabCloseRequested.connect(self._handle_tab_close)
        self.currentChanged.connect(self._on_current_changed)

        self._plus_widget = QWidget()
        super().insertTab(0, self._plus_widget, self.PLUS_LABEL)
        self._hide_plus_close_button()

    # ---------- PLUS TAB helpers ----------
    def _hide_plus_close_button(self) -> None:
        if self._find_plus_tab_index() != 0:
            self._ensure_plus_tab_at_zero()
        self.tabBar().setTabButton(0, QTabBar.RightSide, None)
        self.tabBar().setTabButton(0, QTabBar.LeftSide, None)

    def _find_plus_tab_index(self) -> int:
        for i in range(self.count()):
            if self.widget(i) is self._plus_widget:
                return i
        return -1

    def _ensure_plus_tab_at_zero(self) -> None:
        idx = self._find_plus_tab_index()
        if idx == -1:
            self._plus_widget = QWidget()
            super().insertTab(0, self._plus_widget, self.PLUS_LABEL)
        elif idx != 0:
            super().removeTab(idx)
            super().insertTab(0, self._plus_widget, self.PLUS_LABEL)
        self._hide_plus_close_button()

    # ---------- Creation ----------
    def _get_prefix(self) -> str:
        prefix_style = self.settings.get("tab", {}).get("prefix_style")
        return self.PREFIXES.get(prefix_style, "")

    def create_browser_tab(self, address: Optional[str] = None) -> BrowserTab:
        """Open a new presentation context at index 1.

        address is either a hd:// address or a full host url as handed out
        by AddressResolver.open_url.
        """
        logger.debug("New tab for %s", address)
        if address and address.startswith(self.origin + "/"):
            address = address[len(self.origin) + 1:]
        tab = BrowserTab(
            self.backend,
            self.origin,
            open_tab=self.create_browser_tab,
            address=address,
            filesystem=self.filesystem,
        )
        insert_index = 1
        super().insertTab(insert_index, tab, f"{self._get_prefix()}Loading...")

        tab.title_changed.connect(lambda title, t=tab: self._apply_title_to_widget(t, title))
        if self.address_controller:
            self.address_controller.attach_tab_signals(tab)

        self.setCurrentIndex(insert_index)
        return tab

    # ---------- Close / Destroy ----------
    def _handle_tab_close(self, index: int) -> None:
        """Called by Qt when a tab close button is pressed."""
        widget = self.widget(index)
        if widget and widget is not self._plus_widget:
            self.destroy_tab(widget)

    def destroy_tab(self, widget: QWidget) -> None:
        index = self.indexOf(widget)
        if index == -1 or widget is self._plus_widget:
            return

        super().removeTab(index)
        widget.deleteLater()

        if self.count() > 1:
            new_index = min(index, self.count() - 1) or 1
            self.setCurrentIndex(new_index)
        else:
            self.setCurrentIndex(0)

    # ---------- Tab change logic ----------
    def _on_current_changed(self, index: int) -> None:
        """Update the address bar, or open a tab when "+" is picked."""
        self._ensure_plus_tab_at_zero()
        if index == 0:
            if self.count() > 1:
                self.create_browser_tab()
            else:
                self.window().close()
            return
        current_tab = self.widget(index)
        if isinstance(current_tab, BrowserTab) and self.address_controller:
            self.address_controller.show_address(current_tab.current_address())

    def _apply_title_to_widget(self, widget: QWidget, raw_title: str) -> None:
        raw_title = (raw_title or "").strip()
        prefix = self._get_prefix()
        display = f"{prefix}{raw_title}" if prefix else (raw_title or "New Tab")
        idx = self.indexOf(widget)
        if idx != -1:
            self.setTabText(idx, display)
            self.setTabToolTip(idx, raw_title)
