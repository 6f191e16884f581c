import asyncio
import logging
import socket
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from types import MappingProxyType
from typing import Any
from urllib.parse import ParseResult, SplitResult

import httpx

from configs import packaged_config
from extensions.ext_logging import trace_id_generator, trace_id_var

from .exceptions import FetchError, MalformedTargetError
from .request import GET, Request, RequestBuilder
from .response import Response
from .types import Target, TransportFactory

logger = logging.getLogger(__name__)

# Headers the transport derives from the exchange itself; values set on a
# Request are not sent for these.
TRANSPORT_MANAGED_HEADERS = frozenset(
    {
        "content-length",
        "host",
        "transfer-encoding",
        "connection",
    }
)


def resolve_target(target: Target) -> httpx.URL:
    """
    Turn a URL string, a parsed ``urllib.parse`` result or an ``httpx.URL`` into an absolute http(s) URL.

    Raises:
        MalformedTargetError: the target is not an absolute http or https URL
        TypeError: the target is of an unsupported type
    """
    if isinstance(target, (ParseResult, SplitResult)):
        raw = target.geturl()
    elif isinstance(target, (str, httpx.URL)):
        raw = target
    else:
        raise TypeError(f"Unsupported fetch target type: {type(target).__name__}")

    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise MalformedTargetError(raw, str(e)) from e

    if url.scheme not in ("http", "https"):
        raise MalformedTargetError(raw, "Only absolute http and https URLs can be fetched.")
    if not url.host:
        raise MalformedTargetError(raw, "The URL has no host.")
    return url


def prepare_request_headers(request: Request) -> dict[str, str]:
    return {
        name: value
        for name, value in request.flatten_headers().items()
        if name.lower() not in TRANSPORT_MANAGED_HEADERS
    }


def is_unknown_host(error: BaseException) -> bool:
    """Whether a transport error was caused by a failed host name lookup."""
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        if isinstance(current, socket.gaierror):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False


def read_response(http_response: httpx.Response) -> Response:
    """Read a streamed exchange in full and fold its headers into sets per name."""
    body = "\n".join(http_response.iter_lines())

    encoding = http_response.headers.encoding
    headers: dict[str, set[str]] = {}
    for raw_name, raw_value in http_response.headers.raw:
        headers.setdefault(raw_name.decode(encoding), set()).add(raw_value.decode(encoding))

    return Response(
        status=http_response.status_code,
        status_text=http_response.reason_phrase,
        url=str(http_response.url),
        header_map=MappingProxyType({name: frozenset(values) for name, values in headers.items()}),
        body=body,
    )


class Dispatcher:
    """
    Runs fetches on a shared worker pool.

    Each fetch opens its own client and connection, sends one request and reads
    the whole response before the client is closed. Nothing is retried and no
    deadline is applied; failures other than an unknown host come back through
    the future as ``FetchError``.

    Example usage:
        with Dispatcher() as dispatcher:
            future = dispatcher.submit("https://api.example.com/data", accept_json())
            response = future.result()
            if response.ok and response.is_of_json():
                print(response.json())
    """

    def __init__(
        self,
        executor: ThreadPoolExecutor | None = None,
        transport_factory: TransportFactory | None = None,
        follow_redirects: bool | None = None,
        verify_ssl: bool | None = None,
    ):
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=packaged_config.FETCH_MAX_WORKERS,
            thread_name_prefix="packaged-fetch",
        )
        self._transport_factory = transport_factory
        self._follow_redirects = (
            packaged_config.FETCH_FOLLOW_REDIRECTS if follow_redirects is None else follow_redirects
        )
        self._verify_ssl = packaged_config.FETCH_VERIFY_SSL if verify_ssl is None else verify_ssl

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "Dispatcher":
        return self

    def __exit__(self, *_args: Any) -> None:
        self.close()

    def submit(self, target: Target, request: Request | RequestBuilder | None = None) -> Future[Response]:
        """
        Schedule a fetch and return its future right away.

        The target is resolved before anything is scheduled, so a malformed
        target raises here rather than through the future.
        """
        url = resolve_target(target)
        if request is None:
            request = GET
        elif isinstance(request, RequestBuilder):
            request = request.build()
        return self._executor.submit(self._execute, url, request)

    async def submit_async(self, target: Target, request: Request | RequestBuilder | None = None) -> Response:
        return await asyncio.wrap_future(self.submit(target, request))

    def _create_client(self) -> httpx.Client:
        transport = self._transport_factory() if self._transport_factory else None
        return httpx.Client(
            transport=transport,
            follow_redirects=self._follow_redirects,
            verify=self._verify_ssl,
            timeout=None,
        )

    def _execute(self, url: httpx.URL, request: Request) -> Response:
        token = trace_id_var.set(trace_id_generator())
        try:
            logger.info(f"-> {request.method} {url}")
            start_time = time.time()
            response = self._exchange(url, request)
            latency_ms = int((time.time() - start_time) * 1000)
            logger.info(f"<- {response.status} {response.status_text} ({latency_ms}ms)")
            return response
        finally:
            trace_id_var.reset(token)

    def _exchange(self, url: httpx.URL, request: Request) -> Response:
        content = request.body.encode("utf-8") if request.method.relies_on_body() else None
        with self._create_client() as client:
            try:
                http_request = client.build_request(
                    method=str(request.method),
                    url=url,
                    headers=prepare_request_headers(request),
                    content=content,
                )
            except UnicodeEncodeError as e:
                # httpx only sends ASCII header names and values
                raise FetchError(f"Headers for {url} cannot be encoded: {e}") from e

            try:
                http_response = client.send(http_request, stream=True)
                try:
                    return read_response(http_response)
                finally:
                    http_response.close()
            except httpx.ConnectError as e:
                if not is_unknown_host(e):
                    raise FetchError(f"Connection to {url} failed: {e}") from e
                logger.warning(f"Unknown host for {url}: {e}")
                return Response.unknown_host(str(url))
            except httpx.HTTPError as e:
                raise FetchError(f"Fetching {url} failed: {e}") from e


_default_dispatcher: Dispatcher | None = None
_default_dispatcher_lock = threading.Lock()


def get_default_dispatcher() -> Dispatcher:
    global _default_dispatcher
    with _default_dispatcher_lock:
        if _default_dispatcher is None:
            _default_dispatcher = Dispatcher()
        return _default_dispatcher


def fetch(target: Target, request: Request | RequestBuilder | None = None) -> Future[Response]:
    """
    Fetch ``target`` in the background.

    Args:
        target: URL string, parsed ``urllib.parse`` result or ``httpx.URL``
        request: request or builder to send, a plain GET when omitted

    Returns:
        Future resolving to the Response; wait with ``.result()`` or chain
        with ``add_done_callback``
    """
    return get_default_dispatcher().submit(target, request)


async def fetch_async(target: Target, request: Request | RequestBuilder | None = None) -> Response:
    return await get_default_dispatcher().submit_async(target, request)
