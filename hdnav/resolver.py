# hdnav/resolver.py
import logging
from typing import Optional

from .address_codec import AddressCodec
from .environment import Environment
from .errors import AddressParseFailure
from .models.address import StructuredAddress

logger = logging.getLogger(__name__)


class AddressResolver:
    """Keeps a hd:// address in sync with a host that only knows paths.

    Constructing a resolver is the one-time initialization of a load cycle:
    it reads the displayed path, settles the raw hd:// address and may
    rewrite what the host shows. Any navigation started through set_url or
    set_path reloads the host, which then builds a new resolver.

    Resolution order:
      1. the displayed path already carries hd:// -> keep it, and replace
         the visible history entry with the unqualified form
      2. nothing displayed and the host offers a filesystem default ->
         navigate to that default
      3. anything else is a bare path under hd://
    """

    def __init__(self, environment: Environment, codec: Optional[AddressCodec] = None):
        self.environment = environment
        self.codec = codec or AddressCodec()
        self._url = self._resolve()
        self._address = self._parse(self._url)

    def _resolve(self) -> str:
        """Settle the raw address, possibly rewriting or reloading the host.

        A filesystem default with nothing after hd:// is skipped instead of
        navigated to: the host would come back with an empty path and the
        next load cycle would navigate there again, forever.
        """
        candidate = self.environment.displayed_path()
        if candidate.startswith("/"):
            candidate = candidate[1:]

        if candidate and self.codec.is_qualified(candidate):
            self.environment.normalize_displayed_address(self._host_url(candidate))
            return candidate

        if not candidate:
            default = self.environment.filesystem_default()
            if default is not None:
                if self.codec.strip(default.url):
                    self.environment.navigate_to(self._host_url(default.url))
                    return self.codec.qualify(default.url)
                logger.warning("Ignoring filesystem default %r: no address after %s",
                               default.url, self.codec.MARKER)

        return self.codec.MARKER + candidate

    def _parse(self, raw: str) -> StructuredAddress:
        try:
            return self.codec.parse(raw)
        except AddressParseFailure as e:
            logger.debug("Address %r did not parse: %s", e.raw, e.reason)
            return StructuredAddress()

    def _host_url(self, address: str) -> str:
        return f"{self.environment.origin()}/{self.codec.strip(address)}"

    # ---------- accessors ----------
    def get_url(self) -> Optional[str]:
        return self._url or None

    def get_origin(self) -> Optional[str]:
        return self._address.origin

    def get_hostname(self) -> Optional[str]:
        return self._address.hostname

    def get_path(self) -> Optional[str]:
        return self._address.pathname

    # ---------- mutators ----------
    def set_url(self, address: str) -> None:
        """Navigate the host to address; hd:// prefix optional."""
        self.environment.navigate_to(self._host_url(address))

    def set_path(self, path: str) -> None:
        """Swap only the path of the current address and navigate there.

        Check get_path() first: on an address that did not parse the
        result is a hostless address.
        """
        self._address.pathname = self.codec.normalize_path(path)
        self.set_url(self.codec.to_text(self._address))

    def open_url(self, address: str) -> None:
        self.environment.open_in_new_context(self._host_url(address))
