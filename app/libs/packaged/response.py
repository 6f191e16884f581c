import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .types import ContentType, HeaderMap, Parser, T


@dataclass(frozen=True)
class Response:
    """
    The outcome of one fetch.

    ``header_map`` keeps header names as the server sent them; ``headers(name)``
    looks them up without regard to case.
    """

    status: int
    status_text: str
    url: str
    header_map: HeaderMap = field(default_factory=lambda: MappingProxyType({}))
    body: str = field(default="", repr=False)

    def __hash__(self) -> int:
        return hash((self.status, self.status_text, self.url, frozenset(self.header_map.items()), self.body))

    @classmethod
    def unknown_host(cls, url: str) -> "Response":
        return cls(status=404, status_text="Unknown host", url=url)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body

    def parse(self, parser: Parser[T]) -> T:
        """
        Convert the body with ``parser``.

        Meant to be paired with a deserializer, e.g. ``response.parse(json.loads)``
        or ``response.parse(Model.model_validate_json)``.
        """
        return parser(self.text())

    def json(self) -> Any:
        return self.parse(json.loads)

    def headers(self, name: str) -> frozenset[str]:
        wanted = name.lower()
        values: frozenset[str] = frozenset()
        for key, key_values in self.header_map.items():
            if key.lower() == wanted:
                values = values | key_values
        return values

    def _is_of(self, content_type: ContentType) -> bool:
        return content_type.value in self.headers("Content-Type")

    def is_of_json(self) -> bool:
        return self._is_of(ContentType.JSON)

    def is_of_xml(self) -> bool:
        return self._is_of(ContentType.XML)

    def is_of_text(self) -> bool:
        return self._is_of(ContentType.TEXT)

    def is_of_html(self) -> bool:
        return self._is_of(ContentType.HTML)

    def is_of_css(self) -> bool:
        return self._is_of(ContentType.CSS)

    def is_of_form(self) -> bool:
        return self._is_of(ContentType.FORM)
