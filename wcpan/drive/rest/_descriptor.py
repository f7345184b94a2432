from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any
import re

from .exceptions import InputDataError


type Scalar = str | bool | int
type QueryValue = Scalar | None


_PLACEHOLDER = re.compile(r"\{([A-Za-z][A-Za-z0-9]*)\}")
_RESERVED_NAMES = frozenset(["oauth_token", "fields"])


class BodyKind(Enum):
    NONE = auto()
    JSON = auto()
    MEDIA = auto()


class ResponseKind(Enum):
    JSON = auto()
    EMPTY = auto()
    STREAM = auto()


@dataclass(frozen=True)
class QueryField:
    key: str
    name: str
    value_type: type[Scalar] = str
    required: bool = False
    in_path: bool = False


def optional(key: str, name: str, type_: type[Scalar] = str) -> QueryField:
    return QueryField(key=key, name=name, value_type=type_)


def required(key: str, name: str, type_: type[Scalar] = str) -> QueryField:
    return QueryField(key=key, name=name, value_type=type_, required=True)


def path(key: str, name: str) -> QueryField:
    return QueryField(key=key, name=name, required=True, in_path=True)


@dataclass(frozen=True)
class OperationDescriptor:
    """
    Static wire description of one API operation.

    `path` is relative to the API root and may contain `{name}` placeholders,
    each of which must be backed by a path field in `query`. Query fields are
    emitted in the order they are declared.
    """

    name: str
    method: str
    path: str
    scopes: frozenset[str]
    query: tuple[QueryField, ...] = ()
    body: BodyKind = BodyKind.NONE
    response: ResponseKind = ResponseKind.JSON
    shape: type | None = None
    fixed_query: tuple[tuple[str, str], ...] = ()
    placeholders: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        placeholders = tuple(_PLACEHOLDER.findall(self.path))
        object.__setattr__(self, "placeholders", placeholders)
        _check_descriptor(self)

    @property
    def is_upload(self) -> bool:
        return self.body is BodyKind.MEDIA

    @property
    def path_fields(self) -> tuple[QueryField, ...]:
        return tuple(_ for _ in self.query if _.in_path)

    @property
    def query_fields(self) -> tuple[QueryField, ...]:
        return tuple(_ for _ in self.query if not _.in_path)

    def bind(self, params: Mapping[str, Any]) -> "ParameterSet":
        known = {_.key: _ for _ in self.query}
        unknown = [_ for _ in params if _ not in known]
        if unknown:
            raise TypeError(
                f"{self.name}() got unexpected keyword argument(s): "
                + ", ".join(sorted(unknown))
            )

        path_values: dict[str, str] = {}
        query_values: list[tuple[QueryField, QueryValue]] = []
        for query_field in self.query:
            value = params.get(query_field.key, None)
            if value is None:
                if query_field.required:
                    raise InputDataError(
                        f"{self.name}: missing required parameter `{query_field.key}`"
                    )
            elif not _is_instance(value, query_field.value_type):
                raise InputDataError(
                    f"{self.name}: `{query_field.key}` expects "
                    f"{query_field.value_type.__name__}, got {type(value).__name__}"
                )

            if query_field.in_path:
                if not value:
                    raise InputDataError(
                        f"{self.name}: path parameter `{query_field.key}` is empty"
                    )
                path_values[query_field.name] = value
            else:
                query_values.append((query_field, value))

        return ParameterSet(path=path_values, query=tuple(query_values))


@dataclass(frozen=True)
class ParameterSet:
    path: Mapping[str, str]
    query: tuple[tuple[QueryField, QueryValue], ...]


def _is_instance(value: object, type_: type[Scalar]) -> bool:
    # bool is a subclass of int, but never a valid integer parameter
    if type_ is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, type_)


def _check_descriptor(descriptor: OperationDescriptor) -> None:
    name = descriptor.name

    _check_unique(name, "query key", (_.key for _ in descriptor.query))
    _check_unique(
        name,
        "query name",
        [_.name for _ in descriptor.query_fields]
        + [k for k, _v in descriptor.fixed_query],
    )

    for query_field in descriptor.query:
        if query_field.name in _RESERVED_NAMES:
            raise ValueError(f"{name}: `{query_field.name}` is reserved")
        if query_field.in_path and not query_field.required:
            raise ValueError(f"{name}: path field `{query_field.key}` must be required")
        if query_field.in_path and query_field.value_type is not str:
            raise ValueError(f"{name}: path field `{query_field.key}` must be str")

    path_names = [_.name for _ in descriptor.path_fields]
    if sorted(path_names) != sorted(set(descriptor.placeholders)):
        raise ValueError(
            f"{name}: placeholders {descriptor.placeholders} "
            f"do not match path fields {path_names}"
        )

    if descriptor.is_upload and ("uploadType", "media") not in descriptor.fixed_query:
        raise ValueError(f"{name}: media upload requires `uploadType=media`")
    if descriptor.response is ResponseKind.STREAM and descriptor.shape is not None:
        raise ValueError(f"{name}: streaming response cannot have a JSON shape")
    if descriptor.response is ResponseKind.EMPTY and descriptor.shape is not None:
        raise ValueError(f"{name}: empty response cannot have a JSON shape")


def _check_unique(name: str, what: str, values: Iterable[str]) -> None:
    seen: set[str] = set()
    for value in values:
        if value in seen:
            raise ValueError(f"{name}: duplicated {what} `{value}`")
        seen.add(value)
