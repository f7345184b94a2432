from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import NotRequired, TypedDict

from aiohttp import ClientError, ClientResponse, ClientSession
from yarl import URL

from ._request import RawRequest, RequestBody
from ._response import RawResponse, is_success
from .exceptions import TransportError


class _FetchParams(TypedDict):
    method: str
    url: URL
    headers: dict[str, str]
    data: NotRequired[RequestBody]
    timeout: NotRequired[None]


@asynccontextmanager
async def create_transport() -> AsyncIterator["AiohttpTransport"]:
    async with ClientSession() as session:
        yield AiohttpTransport(session)


class AiohttpTransport:
    """
    Sends one request through a shared aiohttp session.

    Successful buffered responses are read completely before being handed out.
    Streamed responses stay open until the caller leaves the context.
    """

    def __init__(self, session: ClientSession) -> None:
        self._session = session

    @property
    def session(self) -> ClientSession:
        return self._session

    @asynccontextmanager
    async def send(
        self, request: RawRequest, *, stream: bool
    ) -> AsyncIterator[RawResponse]:
        is_upload = isinstance(request.body, bytes)
        kwargs = _prepare_kwargs(request, timeout=not stream and not is_upload)

        chunks: AsyncGenerator[bytes, None] | None = None
        try:
            async with self._session.request(**kwargs) as response:
                if stream or not is_success(response.status):
                    chunks = _iter_chunks(response)
                    body = chunks
                else:
                    body = await response.read()
                yield RawResponse(
                    status=response.status,
                    headers=response.headers,
                    body=body,
                )
        except (ClientError, TimeoutError) as e:
            getLogger(__name__).debug(f"transport failure: {e!r}")
            raise TransportError(str(e)) from e
        finally:
            if chunks is not None:
                await chunks.aclose()


def _prepare_kwargs(request: RawRequest, *, timeout: bool) -> _FetchParams:
    kwargs: _FetchParams = {
        "method": request.method,
        # already percent-encoded, yarl must not requote it
        "url": URL(request.url, encoded=True),
        "headers": dict(request.headers),
    }

    if request.body:
        kwargs["data"] = request.body

    # NOTE Upload or download can take long time.
    # The actual timeout will be controled by the caller.
    # For normal API we use the default value in aiohttp.
    if not timeout:
        kwargs["timeout"] = None

    return kwargs


async def _iter_chunks(response: ClientResponse) -> AsyncGenerator[bytes, None]:
    try:
        async for chunk in response.content.iter_any():
            yield chunk
    except (ClientError, TimeoutError) as e:
        raise TransportError(str(e)) from e
