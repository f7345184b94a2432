from collections.abc import AsyncIterator, Iterable, Mapping
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from ._api import RESOURCES, iter_operations
from ._descriptor import OperationDescriptor
from ._executor import Authenticator, OperationExecutor
from ._lib import API_ROOT, UPLOAD_ROOT
from ._network import create_transport
from ._oauth import OAuth2Authenticator, OAuth2Manager, OAuth2Storage
from ._response import Sink


@asynccontextmanager
async def create_client(
    *,
    client_secret: str | Path,
    oauth_token: str | Path,
    api_root: str = API_ROOT,
    upload_root: str = UPLOAD_ROOT,
) -> AsyncIterator["Client"]:
    storage = OAuth2Storage(
        client_secret=Path(client_secret), oauth_token=Path(oauth_token)
    )
    oauth = OAuth2Manager(storage)
    async with create_transport() as transport:
        authenticator = OAuth2Authenticator(oauth, transport.session)
        executor = OperationExecutor(
            authenticator,
            transport,
            api_root=api_root,
            upload_root=upload_root,
        )
        yield Client(executor)


@asynccontextmanager
async def create_client_with(
    authenticator: Authenticator,
    *,
    api_root: str = API_ROOT,
    upload_root: str = UPLOAD_ROOT,
) -> AsyncIterator["Client"]:
    async with create_transport() as transport:
        executor = OperationExecutor(
            authenticator,
            transport,
            api_root=api_root,
            upload_root=upload_root,
        )
        yield Client(executor)


class Client:
    """
    Entry point of the API.

    Each resource is an attribute, e.g. `await client.files.get(file_id="root")`.
    """

    def __init__(self, executor: OperationExecutor) -> None:
        self._executor = executor

    @property
    def executor(self) -> OperationExecutor:
        return self._executor

    def __getattr__(self, name: str) -> "Resource":
        try:
            operations = RESOURCES[name]
        except KeyError:
            raise AttributeError(f"no such resource: {name}") from None
        return Resource(self._executor, name, operations)

    def __dir__(self) -> Iterable[str]:
        return [*super().__dir__(), *RESOURCES]

    def operations(self) -> list[OperationDescriptor]:
        return list(iter_operations())


class Resource:
    def __init__(
        self,
        executor: OperationExecutor,
        name: str,
        operations: Mapping[str, OperationDescriptor],
        scopes: frozenset[str] | None = None,
    ) -> None:
        self._executor = executor
        self._name = name
        self._operations = operations
        self._scopes = scopes

    @property
    def name(self) -> str:
        return self._name

    def __getattr__(self, name: str) -> "Operation":
        try:
            descriptor = self._operations[name]
        except KeyError:
            raise AttributeError(f"{self._name} has no operation {name}") from None
        return Operation(self._executor, descriptor, self._scopes)

    def __dir__(self) -> Iterable[str]:
        return [*super().__dir__(), *self._operations]

    def with_scopes(self, scopes: Iterable[str]) -> "Resource":
        return Resource(
            self._executor,
            self._name,
            self._operations,
            frozenset(scopes),
        )


class Operation:
    def __init__(
        self,
        executor: OperationExecutor,
        descriptor: OperationDescriptor,
        scopes: frozenset[str] | None,
    ) -> None:
        self._executor = executor
        self._descriptor = descriptor
        self._scopes = scopes

    @property
    def descriptor(self) -> OperationDescriptor:
        return self._descriptor

    async def __call__(
        self,
        body: Any = None,
        /,
        *,
        sink: Sink | None = None,
        scopes: Iterable[str] | None = None,
        **params: Any,
    ) -> Any:
        if scopes is None:
            scopes = self._scopes
        return await self._executor.execute(
            self._descriptor,
            params,
            body=body,
            sink=sink,
            scopes=scopes,
        )
