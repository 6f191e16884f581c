from enum import StrEnum

from .exceptions import UnknownMethodError


class RequestMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"
    CONNECT = "CONNECT"

    def relies_on_body(self) -> bool:
        """Whether a body is written for this method (POST, PUT and PATCH)."""
        return self in (RequestMethod.POST, RequestMethod.PUT, RequestMethod.PATCH)

    @classmethod
    def from_text(cls, name: str) -> "RequestMethod":
        """
        Look up a method by name, ignoring case.

        Raises:
            UnknownMethodError: no method has this name
        """
        for method in cls:
            if method.name.casefold() == name.casefold():
                return method
        raise UnknownMethodError(name)
