from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
import json

from ._descriptor import BodyKind, OperationDescriptor, ParameterSet
from ._lib import API_ROOT, UPLOAD_ROOT
from ._query import encode_query
from .exceptions import InputDataError


type RequestBody = str | bytes

# Serialized payloads which carry no information at all.
_EMPTY_SENTINELS = frozenset(["null", "{}"])


@dataclass(frozen=True)
class Credentials:
    token: str
    scopes: frozenset[str]


@dataclass(frozen=True)
class RawRequest:
    method: str
    url: str
    headers: Mapping[str, str]
    body: RequestBody

    @property
    def redacted_url(self) -> str:
        head, _sep, _tail = self.url.partition("?")
        return head


def build_request(
    descriptor: OperationDescriptor,
    params: ParameterSet,
    credentials: Credentials,
    payload: Any = None,
    *,
    api_root: str = API_ROOT,
    upload_root: str = UPLOAD_ROOT,
) -> RawRequest:
    root = upload_root if descriptor.is_upload else api_root
    url = "".join(
        [
            root,
            resolve_path(descriptor, params),
            "?",
            "".join(f"{k}={v}&" for k, v in descriptor.fixed_query),
            f"oauth_token={credentials.token}&fields=*",
            encode_query(params),
        ]
    )

    if descriptor.body is BodyKind.MEDIA:
        body = _media_body(descriptor, payload)
        headers = {
            "Content-Length": str(len(body)),
        }
    else:
        body = _json_body(descriptor, payload)
        headers = {
            "Content-Type": "application/json",
        }

    return RawRequest(
        method=descriptor.method,
        url=url,
        headers=headers,
        body=body,
    )


def resolve_path(descriptor: OperationDescriptor, params: ParameterSet) -> str:
    # substituted as-is, without escaping
    rv = descriptor.path
    for name in descriptor.placeholders:
        rv = rv.replace(f"{{{name}}}", params.path[name])
    return rv


def serialize_json(payload: Any) -> str:
    text = json.dumps(_strip_none(payload), ensure_ascii=False, separators=(",", ":"))
    if text in _EMPTY_SENTINELS:
        return ""
    return text


def _json_body(descriptor: OperationDescriptor, payload: Any) -> str:
    if descriptor.body is BodyKind.NONE:
        if payload is not None:
            raise InputDataError(f"{descriptor.name} does not accept a request body")
        return ""
    try:
        return serialize_json(payload)
    except (TypeError, ValueError) as e:
        raise InputDataError(f"{descriptor.name}: unserializable body") from e


def _media_body(descriptor: OperationDescriptor, payload: Any) -> bytes:
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise InputDataError(f"{descriptor.name} requires a bytes-like body")
    return bytes(payload)


def _strip_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _strip_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_strip_none(_) for _ in value]
    return value
