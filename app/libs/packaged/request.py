import logging
from dataclasses import dataclass, field
from types import MappingProxyType

from configs import packaged_config

from .methods import RequestMethod
from .types import ContentType, HeaderMap

logger = logging.getLogger(__name__)


def _freeze_headers(headers: dict[str, set[str]]) -> HeaderMap:
    return MappingProxyType({name: frozenset(values) for name, values in headers.items()})


@dataclass(frozen=True)
class Request:
    """
    An HTTP request: method, headers and body.

    Built through ``RequestBuilder`` (or the module-level shortcuts) and never
    changed afterwards. Headers map a name to a set of values; names are matched
    exactly.
    """

    method: RequestMethod = RequestMethod.GET
    headers: HeaderMap = field(default_factory=lambda: MappingProxyType({}))
    body: str = ""

    def __hash__(self) -> int:
        return hash((self.method, frozenset(self.headers.items()), self.body))

    def header_values(self, name: str) -> frozenset[str]:
        return self.headers.get(name, frozenset())

    def flatten_headers(self) -> dict[str, str]:
        """One line per header name, multiple values joined with ``", "``."""
        return {name: ", ".join(sorted(values)) for name, values in self.headers.items()}


class RequestBuilder:
    """
    Mutable accumulator for a ``Request``.

    Starts as a GET with an empty body and the default ``User-Agent``. Every
    setter returns the builder, ``build()`` snapshots the current state and
    leaves the builder usable.

    Example usage:
        request = (
            RequestBuilder()
            .method("post")
            .accept_json()
            .json('{"name": "test"}')
            .build()
        )
    """

    def __init__(self) -> None:
        self._method = RequestMethod.GET
        self._body = ""
        self._headers: dict[str, set[str]] = {}

        self.header("User-Agent", packaged_config.DEFAULT_USER_AGENT)

    def method(self, method: str | RequestMethod) -> "RequestBuilder":
        if not isinstance(method, RequestMethod):
            method = RequestMethod.from_text(method)
        self._method = method
        return self

    def header(self, name: str, value: str | None = None, overwrite: bool = False) -> "RequestBuilder":
        """
        Add a header value, or parse a ``"Name: Value"`` line when ``value`` is omitted.

        A line is split at its first colon and both sides are trimmed; a line
        without a colon is ignored. With ``overwrite`` the existing values of
        ``name`` are replaced instead of extended.
        """
        if value is None:
            return self._header_line(name)
        if overwrite:
            self._headers[name] = {value}
        else:
            self._headers.setdefault(name, set()).add(value)
        return self

    def _header_line(self, line: str) -> "RequestBuilder":
        name, colon, value = line.partition(":")
        if not colon:
            logger.debug(f"Ignoring header line without a colon: {line!r}")
            return self
        return self.header(name.strip(), value.strip())

    def accept(self, *accept: str) -> "RequestBuilder":
        for value in accept:
            self.header("Accept", value)
        return self

    def accept_json(self) -> "RequestBuilder":
        return self.accept(ContentType.JSON.value)

    def accept_xml(self) -> "RequestBuilder":
        return self.accept(ContentType.XML.value)

    def accept_text(self) -> "RequestBuilder":
        return self.accept(ContentType.TEXT.value)

    def accept_html(self) -> "RequestBuilder":
        return self.accept(ContentType.HTML.value)

    def accept_css(self) -> "RequestBuilder":
        return self.accept(ContentType.CSS.value)

    def accept_form(self) -> "RequestBuilder":
        return self.accept(ContentType.FORM.value)

    def _typed_body(self, body: str, content_type: ContentType) -> "RequestBuilder":
        return self.body(body).header("Content-Type", content_type.value, overwrite=True)

    def json(self, json: str) -> "RequestBuilder":
        return self._typed_body(json, ContentType.JSON)

    def xml(self, xml: str) -> "RequestBuilder":
        return self._typed_body(xml, ContentType.XML)

    def text(self, text: str) -> "RequestBuilder":
        return self._typed_body(text, ContentType.TEXT)

    def html(self, html: str) -> "RequestBuilder":
        return self._typed_body(html, ContentType.HTML)

    def css(self, css: str) -> "RequestBuilder":
        return self._typed_body(css, ContentType.CSS)

    def form(self, form: str) -> "RequestBuilder":
        return self._typed_body(form, ContentType.FORM)

    def body(self, body: str) -> "RequestBuilder":
        """Set the body and overwrite ``Content-Length`` with its length in characters."""
        self._body = body
        return self.header("Content-Length", str(len(body)), overwrite=True)

    def build(self) -> Request:
        return Request(method=self._method, headers=_freeze_headers(self._headers), body=self._body)


# Shortcuts starting from a fresh builder


def method(method: str | RequestMethod) -> RequestBuilder:
    return RequestBuilder().method(method)


def header(name: str, value: str | None = None, overwrite: bool = False) -> RequestBuilder:
    return RequestBuilder().header(name, value, overwrite)


def accept(*accept: str) -> RequestBuilder:
    return RequestBuilder().accept(*accept)


def accept_json() -> RequestBuilder:
    return RequestBuilder().accept_json()


def accept_xml() -> RequestBuilder:
    return RequestBuilder().accept_xml()


def accept_text() -> RequestBuilder:
    return RequestBuilder().accept_text()


def accept_html() -> RequestBuilder:
    return RequestBuilder().accept_html()


def accept_css() -> RequestBuilder:
    return RequestBuilder().accept_css()


def accept_form() -> RequestBuilder:
    return RequestBuilder().accept_form()


def json(json: str) -> RequestBuilder:
    return RequestBuilder().json(json)


def xml(xml: str) -> RequestBuilder:
    return RequestBuilder().xml(xml)


def text(text: str) -> RequestBuilder:
    return RequestBuilder().text(text)


def html(html: str) -> RequestBuilder:
    return RequestBuilder().html(html)


def css(css: str) -> RequestBuilder:
    return RequestBuilder().css(css)


def form(form: str) -> RequestBuilder:
    return RequestBuilder().form(form)


def body(body: str) -> RequestBuilder:
    return RequestBuilder().body(body)


GET: Request = RequestBuilder().build()
