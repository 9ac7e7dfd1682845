"""Fake host and browser backend shared by the tests."""

from typing import List, Optional

from hdnav.browser.backend import BrowserBackend
from hdnav.environment import Environment
from hdnav.models.address import FilesystemDefault

ORIGIN = "http://localhost:8080"


class FakeEnvironment(Environment):
    """In-memory host that records every write the resolver makes."""

    def __init__(self, path: str = "/", filesystem: Optional[FilesystemDefault] = None,
                 origin: str = ORIGIN):
        self.path = path
        self._origin = origin
        self.filesystem = filesystem
        self.filesystem_reads = 0
        self.replaced: List[str] = []
        self.navigated: List[str] = []
        self.opened: List[str] = []

    def displayed_path(self) -> str:
        return self.path

    def origin(self) -> str:
        return self._origin

    def filesystem_default(self) -> Optional[FilesystemDefault]:
        self.filesystem_reads += 1
        return self.filesystem

    def normalize_displayed_address(self, url: str) -> None:
        self.replaced.append(url)
        self.path = url[len(self._origin):]

    def navigate_to(self, url: str) -> None:
        self.navigated.append(url)

    def open_in_new_context(self, url: str) -> None:
        self.opened.append(url)


def init_fake_view(view):
    """Give any object (a plain one or a QWidget) the state FakeBackend uses."""
    view.url = ""
    view.title = "Page"
    view.history = []
    view.url_listeners = []
    view.title_listeners = []
    view.open_listeners = []
    return view


class FakeView:
    def __init__(self):
        init_fake_view(self)


class FakeBackend(BrowserBackend):
    """Backend whose views are plain objects, so tests need no Qt display.

    load_url notifies url listeners synchronously, so a navigation started
    during a load cycle runs before that cycle returns.
    """

    def create_view(self, parent=None):
        return FakeView()

    def load_url(self, view, url: str) -> None:
        view.history.append(url)
        view.url = url
        for callback in list(view.url_listeners):
            callback(url)

    def current_url(self, view) -> str:
        return view.url

    def replace_url(self, view, url: str) -> None:
        if view.history:
            view.history[-1] = url
        else:
            view.history.append(url)
        view.url = url

    def on_url_changed(self, view, callback) -> None:
        view.url_listeners.append(callback)

    def on_title_changed(self, view, callback) -> None:
        view.title_listeners.append(callback)

    def on_open_requested(self, view, callback) -> None:
        view.open_listeners.append(callback)

    def request_open(self, view, url: str) -> None:
        """Act as the page calling window.open(url)."""
        for callback in list(view.open_listeners):
            callback(url)
