"""Unit tests for hd:// address parsing and formatting."""

import pytest

from hdnav.address_codec import AddressCodec
from hdnav.errors import AddressParseFailure
from hdnav.models.address import StructuredAddress


@pytest.fixture
def codec():
    return AddressCodec()


class TestMarker:
    """Test qualifying and stripping the hd:// prefix."""

    def test_qualify_bare_path(self, codec):
        assert codec.qualify("site/index.html") == "hd://site/index.html"

    def test_qualify_is_idempotent(self, codec):
        assert codec.qualify("hd://site") == "hd://site"

    def test_strip_removes_one_marker(self, codec):
        assert codec.strip("hd://site/a") == "site/a"
        assert codec.strip("hd://hd://site") == "hd://site"

    def test_strip_leaves_bare_path(self, codec):
        assert codec.strip("site/a") == "site/a"

    def test_other_schemes_are_not_qualified(self, codec):
        assert not codec.is_qualified("http://site")
        assert not codec.is_qualified("")


class TestParse:
    """Test splitting hd:// addresses into structured parts."""

    def test_full_address(self, codec):
        addr = codec.parse("hd://Example.Drive/docs/readme.md?rev=3#intro")
        assert addr.origin == "hd://example.drive"
        assert addr.hostname == "example.drive"
        assert addr.pathname == "/docs/readme.md"
        assert addr.query == "rev=3"
        assert addr.fragment == "intro"

    def test_empty_path_becomes_root(self, codec):
        addr = codec.parse("hd://site")
        assert addr.pathname == "/"
        assert addr.query is None
        assert addr.fragment is None

    def test_port_is_part_of_origin(self, codec):
        addr = codec.parse("hd://site:8000/a")
        assert addr.origin == "hd://site:8000"
        assert addr.hostname == "site"

    def test_ipv6_host(self, codec):
        addr = codec.parse("hd://[::1]/a")
        assert addr.hostname == "::1"
        assert addr.origin == "hd://[::1]"

    def test_userinfo_is_dropped(self, codec):
        addr = codec.parse("hd://user:pw@site/a")
        assert addr.hostname == "site"
        assert addr.origin == "hd://site"

    def test_dot_segments_removed(self, codec):
        assert codec.parse("hd://site/a/./b/../c").pathname == "/a/c"
        assert codec.parse("hd://site/a/..").pathname == "/"

    def test_path_is_percent_encoded(self, codec):
        assert codec.parse("hd://site/my file.txt").pathname == "/my%20file.txt"
        assert codec.parse("hd://site/already%20done").pathname == "/already%20done"

    @pytest.mark.parametrize("raw", [
        "hd://",
        "hd:///only/a/path",
        "hd://bad host/a",
        "hd://a<b/",
        "hd://site:notaport/",
        "hd://site:99999/",
        "hd://[::1/",
        "site/no/marker",
    ])
    def test_malformed_addresses_fail(self, codec, raw):
        with pytest.raises(AddressParseFailure) as excinfo:
            codec.parse(raw)
        assert excinfo.value.raw == raw

    def test_lone_surrogate_in_path_fails(self, codec):
        with pytest.raises(AddressParseFailure) as excinfo:
            codec.parse("hd://site/\ud800")
        assert "surrogate" in excinfo.value.reason

    def test_failure_is_a_value_error(self, codec):
        with pytest.raises(ValueError):
            codec.parse("hd://")


class TestFormat:
    """Test serializing structured addresses back to text."""

    def test_to_text_keeps_query_and_fragment(self, codec):
        addr = codec.parse("hd://site/a?x=1#top")
        addr.pathname = "/b"
        assert codec.to_text(addr) == "hd://site/b?x=1#top"

    def test_to_text_of_unparsed_address(self, codec):
        assert codec.to_text(StructuredAddress()) == "hd://"

    def test_normalize_path_adds_leading_slash(self, codec):
        assert codec.normalize_path("a/b") == "/a/b"
        assert codec.normalize_path("") == "/"
        assert codec.normalize_path("/dir/") == "/dir/"
