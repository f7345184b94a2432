from collections.abc import Iterable, Mapping
from contextlib import AbstractAsyncContextManager
from logging import getLogger
from typing import Any, Protocol

from ._descriptor import BodyKind, OperationDescriptor, ParameterSet, ResponseKind
from ._lib import API_ROOT, UPLOAD_ROOT
from ._request import Credentials, RawRequest, build_request
from ._response import RawResponse, Sink, interpret
from .exceptions import ApiError, AuthError, InputDataError, TransportError


class Authenticator(Protocol):
    async def acquire(self, scopes: frozenset[str]) -> Credentials: ...


class Transport(Protocol):
    def send(
        self, request: RawRequest, *, stream: bool
    ) -> AbstractAsyncContextManager[RawResponse]: ...


class OperationExecutor:
    """
    Runs one descriptor-driven API call.

    Each call goes through scope resolution, authentication, request building,
    sending, and response interpretation. Any failure ends the call; nothing
    is retried here.
    """

    def __init__(
        self,
        authenticator: Authenticator,
        transport: Transport,
        *,
        api_root: str = API_ROOT,
        upload_root: str = UPLOAD_ROOT,
    ) -> None:
        self._authenticator = authenticator
        self._transport = transport
        self._api_root = api_root
        self._upload_root = upload_root

    async def execute(
        self,
        descriptor: OperationDescriptor,
        params: ParameterSet | Mapping[str, Any] | None = None,
        *,
        body: Any = None,
        sink: Sink | None = None,
        scopes: Iterable[str] | None = None,
    ) -> Any:
        if not isinstance(params, ParameterSet):
            params = descriptor.bind({} if params is None else params)
        _check_payload(descriptor, body, sink)

        resolved = resolve_scopes(descriptor, scopes)
        getLogger(__name__).debug(f"{descriptor.name}: scopes resolved")

        credentials = await self._authenticate(resolved)
        getLogger(__name__).debug(f"{descriptor.name}: authenticated")

        request = build_request(
            descriptor,
            params,
            credentials,
            body,
            api_root=self._api_root,
            upload_root=self._upload_root,
        )
        getLogger(__name__).debug(
            f"{descriptor.name}: {request.method} {request.redacted_url}"
        )

        stream = descriptor.response is ResponseKind.STREAM
        try:
            async with self._transport.send(request, stream=stream) as response:
                getLogger(__name__).debug(
                    f"{descriptor.name}: got {response.status}"
                )
                rv = await interpret(descriptor, response, sink)
        except ApiError:
            raise
        except Exception as e:
            raise TransportError(f"{descriptor.name} failed") from e

        getLogger(__name__).debug(f"{descriptor.name}: done")
        return rv

    async def _authenticate(self, scopes: frozenset[str]) -> Credentials:
        try:
            return await self._authenticator.acquire(scopes)
        except AuthError:
            raise
        except Exception as e:
            raise AuthError() from e


def resolve_scopes(
    descriptor: OperationDescriptor,
    scopes: Iterable[str] | None,
) -> frozenset[str]:
    if scopes is not None:
        explicit = frozenset(scopes)
        if explicit:
            return explicit
    return descriptor.scopes


def _check_payload(
    descriptor: OperationDescriptor,
    body: Any,
    sink: Sink | None,
) -> None:
    if descriptor.response is ResponseKind.STREAM and sink is None:
        raise InputDataError(f"{descriptor.name} requires a sink")
    if descriptor.response is not ResponseKind.STREAM and sink is not None:
        raise InputDataError(f"{descriptor.name} does not stream its response")
    if descriptor.body is BodyKind.NONE and body is not None:
        raise InputDataError(f"{descriptor.name} does not accept a request body")
    if descriptor.body is BodyKind.MEDIA and not isinstance(
        body, (bytes, bytearray, memoryview)
    ):
        raise InputDataError(f"{descriptor.name} requires a bytes-like body")

