# hdnav/address_codec.py
import re
import urllib.parse
from typing import List

from .errors import AddressParseFailure
from .models.address import StructuredAddress


class AddressCodec:
    MARKER = "hd://"
    # urllib only splits an authority out of schemes it knows
    PLACEHOLDER = "http://"
    PATH_SAFE = "/%!$&'()*+,;=:@"
    FORBIDDEN_HOST = re.compile(r"[\x00-\x20#%/:<>?@\[\\\]^|\x7f]")

    def is_qualified(self, text: str) -> bool:
        return text.startswith(self.MARKER)

    def qualify(self, text: str) -> str:
        if self.is_qualified(text):
            return text
        return self.MARKER + text

    def strip(self, text: str) -> str:
        if self.is_qualified(text):
            return text[len(self.MARKER):]
        return text

    def parse(self, raw: str) -> StructuredAddress:
        if not self.is_qualified(raw):
            raise AddressParseFailure(raw, f"missing {self.MARKER} prefix")
        try:
            parts = urllib.parse.urlsplit(self.PLACEHOLDER + self.strip(raw))
            port = parts.port
            # quote() raises UnicodeEncodeError on lone surrogates
            pathname = self.normalize_path(parts.path)
        except ValueError as e:
            raise AddressParseFailure(raw, str(e)) from e

        hostname = parts.hostname
        if not hostname:
            raise AddressParseFailure(raw, "missing hostname")
        if ":" in hostname:
            # IPv6 literal, urllib has already validated the brackets
            host = f"[{hostname}]"
        elif self.FORBIDDEN_HOST.search(hostname):
            raise AddressParseFailure(raw, f"forbidden character in host {hostname!r}")
        else:
            host = hostname

        origin = self.MARKER + host
        if port is not None:
            origin += f":{port}"

        return StructuredAddress(
            origin=origin,
            hostname=hostname,
            pathname=pathname,
            query=parts.query or None,
            fragment=parts.fragment or None,
        )

    def to_text(self, address: StructuredAddress) -> str:
        text = (address.origin or self.MARKER) + (address.pathname or "")
        if address.query:
            text += f"?{address.query}"
        if address.fragment:
            text += f"#{address.fragment}"
        return text

    def normalize_path(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        path = self._remove_dot_segments(path)
        return urllib.parse.quote(path, safe=self.PATH_SAFE)

    def _remove_dot_segments(self, path: str) -> str:
        segments = path.split("/")[1:]
        out: List[str] = []
        for seg in segments:
            if seg == "..":
                if out:
                    out.pop()
            elif seg != ".":
                out.append(seg)
        # '/a/..' and '/a/.' still name a directory
        if segments[-1] in (".", ".."):
            out.append("")
        return "/" + "/".join(out)
