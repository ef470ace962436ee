import asyncio
import threading
from logging import getLogger
from typing import Callable, Mapping, Optional

from ._config import Config
from ._services._builder import RequestBuilder
from ._services._dispatcher import AsyncioDispatcher, Dispatcher, get_default_dispatcher
from ._services._pipeline import RequestPipeline
from ._services._transport import HttpxTransport, Transport
from ._utils.constants import DEFAULT_CONTENT_TYPE, HEADER_CONTENT_TYPE
from .models.errors import TransportUnavailableError
from .models.request import HttpMethod, RequestSpec
from .models.response import Continuation, ResponseResult, ResultHandler

TransportFactory = Callable[[Config], Transport]


def continuation_handler(callback: Optional[Continuation]) -> Optional[ResultHandler]:
    """Adapt a ``(success, status_code, body, error_message)`` callback."""
    if callback is None:
        return None

    def _handle(result: ResponseResult) -> None:
        callback(result.success, result.status_code, result.body, result.error_message)

    return _handle


class HttpClient:
    """Non-blocking HTTP client that reports back through callbacks.

    Every request method returns immediately. The callback is invoked
    exactly once, on the dispatcher's designated context, with the outcome
    of the request; failures (bad input, network errors, non-2xx answers)
    come back through the same callback instead of being raised.

    Args:
        config: Client settings. Defaults to ``Config.from_env()``.
        dispatcher: Where callbacks run. Defaults to the process-wide
            dispatcher thread.
        transport: A ready transport to use instead of creating one.
        transport_factory: Builds the transport on first use when
            ``transport`` is not given.

    Examples:
        ```python
        from httpbridge import CallbackDispatcher, HttpClient

        dispatcher = CallbackDispatcher()
        client = HttpClient(dispatcher=dispatcher)

        def on_response(success, status_code, body, error_message):
            print(status_code, body if success else error_message)

        client.get("https://example.com/", on_response)
        dispatcher.process_pending(timeout=30)
        ```
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        dispatcher: Optional[Dispatcher] = None,
        transport: Optional[Transport] = None,
        transport_factory: Optional[TransportFactory] = None,
    ) -> None:
        self._logger = getLogger("httpbridge")
        self._config = config or Config.from_env()
        self._dispatcher = dispatcher
        self._transport = transport
        self._transport_factory = transport_factory or self._default_transport
        self._builder = RequestBuilder(user_agent=self._config.user_agent)
        self._lock = threading.Lock()
        self._closed = False

    @staticmethod
    def _default_transport(config: Config) -> Transport:
        return HttpxTransport(max_workers=config.max_workers)

    @property
    def dispatcher(self) -> Dispatcher:
        if self._dispatcher is None:
            self._dispatcher = get_default_dispatcher()
        return self._dispatcher

    def _get_transport(self) -> Transport:
        with self._lock:
            if self._closed:
                raise TransportUnavailableError()
            if self._transport is None:
                transport = self._transport_factory(self._config)
                if transport is None:
                    raise TransportUnavailableError()
                self._transport = transport
            return self._transport

    def _submit(
        self,
        spec: RequestSpec,
        handler: Optional[ResultHandler],
        dispatcher: Optional[Dispatcher] = None,
    ) -> None:
        RequestPipeline(
            spec,
            handler,
            dispatcher or self.dispatcher,
            self._get_transport,
            self._builder,
        ).run()

    def submit(self, spec: RequestSpec, on_result: Optional[ResultHandler]) -> None:
        """Like :meth:`send`, but the handler receives the whole ``ResponseResult``."""
        self._submit(spec, on_result)

    def send(self, spec: RequestSpec, callback: Optional[Continuation]) -> None:
        self._submit(spec, continuation_handler(callback))

    def get(self, url: str, callback: Optional[Continuation]) -> None:
        self.send(RequestSpec(url=url, method=HttpMethod.GET.value), callback)

    def post(
        self,
        url: str,
        body: str,
        content_type: str,
        callback: Optional[Continuation],
    ) -> None:
        self.send(
            RequestSpec(
                url=url,
                method=HttpMethod.POST.value,
                body=body,
                headers={HEADER_CONTENT_TYPE: content_type or DEFAULT_CONTENT_TYPE},
            ),
            callback,
        )

    def request_with_headers(
        self,
        url: str,
        method: str,
        body: str,
        headers: Optional[Mapping[str, str]],
        callback: Optional[Continuation],
    ) -> None:
        self.send(
            RequestSpec(url=url, method=method, body=body, headers=headers or {}),
            callback,
        )

    async def fetch(
        self,
        url: str,
        method: str = HttpMethod.GET.value,
        body: str = "",
        headers: Optional[Mapping[str, str]] = None,
    ) -> ResponseResult:
        """Run a request with the running event loop as the callback context.

        Returns:
            ResponseResult: The full result, headers and timing included.
                Failures are returned, not raised.
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[ResponseResult] = loop.create_future()
        self._submit(
            RequestSpec(url=url, method=method, body=body, headers=headers or {}),
            future.set_result,
            dispatcher=AsyncioDispatcher(loop),
        )
        return await future

    def close(self) -> None:
        """Release the transport. Requests made afterwards report it unavailable."""
        with self._lock:
            self._closed = True
            transport, self._transport = self._transport, None
        if transport is not None:
            self._logger.debug("Closing HTTP transport")
            transport.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


_default_client: Optional[HttpClient] = None
_default_client_lock = threading.Lock()


def get_default_client() -> HttpClient:
    global _default_client
    with _default_client_lock:
        if _default_client is None:
            _default_client = HttpClient()
        return _default_client


def make_get_request(url: str, callback: Optional[Continuation]) -> None:
    get_default_client().get(url, callback)


def make_post_request(
    url: str, body: str, content_type: str, callback: Optional[Continuation]
) -> None:
    get_default_client().post(url, body, content_type, callback)


def make_request_with_headers(
    url: str,
    method: str,
    body: str,
    headers: Optional[Mapping[str, str]],
    callback: Optional[Continuation],
) -> None:
    get_default_client().request_with_headers(url, method, body, headers, callback)
