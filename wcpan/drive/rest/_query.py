from collections.abc import Iterable
from string import ascii_letters, digits

from ._descriptor import ParameterSet, QueryField, QueryValue, Scalar


_UNRESERVED = frozenset((ascii_letters + digits).encode("ascii"))


def percent_encode(text: str) -> str:
    """
    Escapes every byte which is not ASCII alphanumeric.

    Stricter than RFC 3986: `-`, `_`, `.` and `~` are escaped as well.
    """
    return "".join(
        chr(byte) if byte in _UNRESERVED else f"%{byte:02X}"
        for byte in text.encode("utf-8")
    )


def to_query_text(value: Scalar, /) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return value


def encode_query(params: ParameterSet) -> str:
    return "".join(
        f"&{name}={percent_encode(to_query_text(value))}"
        for name, value in _present_pairs(params.query)
    )


def _present_pairs(
    query: Iterable[tuple[QueryField, QueryValue]],
) -> Iterable[tuple[str, Scalar]]:
    for query_field, value in query:
        # required fields are guaranteed to be bound
        if value is None:
            continue
        yield query_field.name, value
