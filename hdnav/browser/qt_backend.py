# hdnav/browser/qt_backend.py
import json
import logging

from PySide6.QtCore import QUrl, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtWebEngineCore import QWebEnginePage
from PySide6.QtWebEngineWidgets import QWebEngineView
from .backend import BrowserBackend

logger = logging.getLogger(__name__)

# QtWebEngine has no Python API for history.replaceState, so run it in the page
REPLACE_STATE_JS = "history.replaceState(history.state, document.title, {url});"


class HdPage(QWebEnginePage):
    """Page that hands window.open / target=_blank requests to the tab."""

    open_requested = Signal(str)

    def createWindow(self, _type):
        # the target url is only known once the throwaway page starts loading
        page = QWebEnginePage(self)
        page.urlChanged.connect(lambda qurl, p=page: self._forward(qurl, p))
        return page

    def _forward(self, qurl: QUrl, page: QWebEnginePage) -> None:
        if qurl.isEmpty():
            return
        self.open_requested.emit(qurl.toString())
        page.deleteLater()


class QTBackend(BrowserBackend):
    def create_view(self, parent: QWidget | None = None) -> QWidget:
        container = QWidget(parent)
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        view = QWebEngineView(container)
        view.setPage(HdPage(view))
        layout.addWidget(view)
        container.setLayout(layout)
        container._view = view
        return container

    def load_url(self, view: QWidget, url: str) -> None:
        view._view.setUrl(QUrl(url))

    def current_url(self, view: QWidget) -> str:
        return view._view.url().toString()

    def replace_url(self, view: QWidget, url: str) -> None:
        script = REPLACE_STATE_JS.format(url=json.dumps(url))
        logger.debug("replaceState -> %s", url)
        view._view.page().runJavaScript(script)

    def on_url_changed(self, view: QWidget, callback) -> None:
        view._view.urlChanged.connect(lambda qurl: callback(qurl.toString()))

    def on_title_changed(self, view: QWidget, callback) -> None:
        view._view.titleChanged.connect(callback)

    def on_open_requested(self, view: QWidget, callback) -> None:
        view._view.page().open_requested.connect(callback)
