from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import TypeVar
from urllib.parse import ParseResult, SplitResult

import httpx

T = TypeVar("T")

HeaderMap = Mapping[str, frozenset[str]]
Parser = Callable[[str], T]
Target = str | ParseResult | SplitResult | httpx.URL
TransportFactory = Callable[[], httpx.BaseTransport]


class ContentType(StrEnum):
    JSON = "application/json"
    XML = "application/xml"
    TEXT = "text/plain"
    HTML = "text/html"
    CSS = "text/css"
    FORM = "application/x-www-form-urlencoded"
