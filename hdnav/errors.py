# hdnav/errors.py


class AddressParseFailure(ValueError):
    """Raised when a hd:// address cannot be split into its structured parts."""

    def __init__(self, raw: str, reason: str):
        super().__init__(f"Cannot parse address {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason
