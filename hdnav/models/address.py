# hdnav/models/address.py
from dataclasses import dataclass
from typing import Optional


@dataclass
class StructuredAddress:
    origin: Optional[str] = None      # 'hd://host[:port]'
    hostname: Optional[str] = None
    pathname: Optional[str] = None    # always starts with '/' once parsed
    query: Optional[str] = None       # text after '?', without it
    fragment: Optional[str] = None    # text after '#', without it


@dataclass(frozen=True)
class FilesystemDefault:
    url: str                          # scheme-qualified, e.g. 'hd://home/'
