from collections.abc import AsyncIterable, Mapping
from dataclasses import dataclass
from functools import cache
from inspect import isawaitable
from logging import getLogger
from typing import Any, Protocol, get_origin, get_type_hints, is_typeddict
import json

from ._descriptor import OperationDescriptor, ResponseKind
from .exceptions import DecodeError, HttpError, InputDataError, SinkError


type ResponseBody = bytes | AsyncIterable[bytes]


class Sink(Protocol):
    """
    Destination of streamed content.

    `write` may be a plain method (e.g. a binary file object) or a coroutine.
    """

    def write(self, chunk: bytes, /) -> Any: ...


@dataclass
class RawResponse:
    status: int
    headers: Mapping[str, str]
    body: ResponseBody


def is_success(status: int) -> bool:
    return 200 <= status < 300


async def interpret(
    descriptor: OperationDescriptor,
    response: RawResponse,
    sink: Sink | None = None,
) -> Any:
    if not is_success(response.status):
        # error bodies are never parsed
        getLogger(__name__).error(f"{descriptor.name} got {response.status}")
        raise HttpError(response.status)

    if descriptor.response is ResponseKind.STREAM:
        if sink is None:
            raise InputDataError(f"{descriptor.name} requires a sink")
        await write_to_sink(response.body, sink)
        return None

    data = await read_body(response.body)

    if descriptor.response is ResponseKind.EMPTY:
        _report_unexpected_content(descriptor, data)
        return None

    return decode_json(data, descriptor.shape)


async def read_body(body: ResponseBody) -> bytes:
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    return b"".join([chunk async for chunk in body])


async def write_to_sink(body: ResponseBody, sink: Sink) -> None:
    if isinstance(body, (bytes, bytearray)):
        if body:
            await _write_one(sink, bytes(body))
        return

    async for chunk in body:
        await _write_one(sink, chunk)


def decode_json(data: bytes, shape: type | None = None) -> Any:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("response body is not valid UTF-8") from e

    try:
        rv = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"response body is not valid JSON: {e}") from e

    if shape is not None:
        check_shape(rv, shape)
    return rv


def check_shape(value: Any, shape: type) -> None:
    """
    Shallow check of a decoded value against a TypedDict.

    Only the top-level object is verified: it must be a JSON object and every
    declared key which is present must hold a value of the matching JSON kind.
    """
    if not isinstance(value, dict):
        raise DecodeError(
            f"expected {shape.__name__} object, got {type(value).__name__}"
        )

    for key, expected in _shape_hints(shape).items():
        if key not in value or value[key] is None:
            continue
        if not _is_kind_of(value[key], expected):
            raise DecodeError(f"{shape.__name__}.{key} has unexpected type")


@cache
def _shape_hints(shape: type) -> dict[str, Any]:
    return get_type_hints(shape)


def _is_kind_of(value: Any, expected: Any) -> bool:
    if is_typeddict(expected):
        return isinstance(value, dict)

    origin = get_origin(expected) or expected
    if origin is bool:
        return isinstance(value, bool)
    if origin is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if origin is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if origin is str:
        return isinstance(value, str)
    if origin is list:
        return isinstance(value, list)
    if origin is dict:
        return isinstance(value, dict)
    return True


async def _write_one(sink: Sink, chunk: bytes) -> None:
    try:
        rv = sink.write(chunk)
        if isawaitable(rv):
            await rv
    except Exception as e:
        raise SinkError(f"failed to write {len(chunk)} bytes") from e


def _report_unexpected_content(descriptor: OperationDescriptor, data: bytes) -> None:
    if not data:
        return
    try:
        content = decode_json(data)
    except DecodeError:
        content = data[:256]
    getLogger(__name__).debug(f"{descriptor.name} returned {content!r}")
