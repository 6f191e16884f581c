"""Fluent HTTP request builder and background fetch dispatcher."""

from .client import Dispatcher, fetch, fetch_async, get_default_dispatcher, resolve_target
from .exceptions import FetchError, MalformedTargetError, PackagedError, UnknownMethodError
from .methods import RequestMethod
from .request import (
    GET,
    Request,
    RequestBuilder,
    accept,
    accept_css,
    accept_form,
    accept_html,
    accept_json,
    accept_text,
    accept_xml,
    body,
    css,
    form,
    header,
    html,
    json,
    method,
    text,
    xml,
)
from .response import Response
from .types import ContentType, HeaderMap, Parser, Target, TransportFactory

__all__ = [
    "Dispatcher",
    "fetch",
    "fetch_async",
    "get_default_dispatcher",
    "resolve_target",
    "PackagedError",
    "UnknownMethodError",
    "MalformedTargetError",
    "FetchError",
    "RequestMethod",
    "GET",
    "Request",
    "RequestBuilder",
    "Response",
    "ContentType",
    "HeaderMap",
    "Parser",
    "Target",
    "TransportFactory",
    "method",
    "header",
    "accept",
    "accept_json",
    "accept_xml",
    "accept_text",
    "accept_html",
    "accept_css",
    "accept_form",
    "json",
    "xml",
    "text",
    "html",
    "css",
    "form",
    "body",
]
