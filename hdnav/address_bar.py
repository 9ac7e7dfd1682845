# hdnav/address_bar.py
import logging

from PySide6.QtWidgets import QLineEdit
from .browser.tab import BrowserTab

logger = logging.getLogger(__name__)


class AddressBarController:
    def __init__(self, tab_manager: "TabManager"):
        self.tab_manager = tab_manager
        self.line_edit: QLineEdit | None = None

    def bind(self, line_edit: QLineEdit) -> None:
        self.line_edit = line_edit
        self.line_edit.returnPressed.connect(self._on_submit)

    def attach_tab_signals(self, tab: BrowserTab) -> None:
        tab.address_changed.connect(lambda address, t=tab: self._on_tab_address_changed(t, address))

    def show_address(self, address: str) -> None:
        if self.line_edit:
            self.line_edit.setText(address)

    def _on_tab_address_changed(self, tab: BrowserTab, address: str) -> None:
        # background tabs keep loading; only the visible one owns the bar
        if self.tab_manager.currentWidget() is tab:
            self.show_address(address)

    def _on_submit(self) -> None:
        if not self.line_edit:
            return
        text = self.line_edit.text().strip()
        current_tab = self.tab_manager.currentWidget()
        if isinstance(current_tab, BrowserTab):
            current_tab.navigate_to(text)
        else:
            logger.debug("No browser tab focused, opening %s in a new one", text)
            self.tab_manager.create_browser_tab(text)
