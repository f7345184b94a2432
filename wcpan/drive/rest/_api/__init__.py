from collections.abc import Iterator, Mapping

from .._descriptor import OperationDescriptor
from . import (
    about,
    changes,
    channels,
    comments,
    drives,
    files,
    permissions,
    replies,
    revisions,
    teamdrives,
)


RESOURCES: Mapping[str, Mapping[str, OperationDescriptor]] = {
    "about": about.OPERATIONS,
    "changes": changes.OPERATIONS,
    "channels": channels.OPERATIONS,
    "comments": comments.OPERATIONS,
    "drives": drives.OPERATIONS,
    "files": files.OPERATIONS,
    "permissions": permissions.OPERATIONS,
    "replies": replies.OPERATIONS,
    "revisions": revisions.OPERATIONS,
    "teamdrives": teamdrives.OPERATIONS,
}


def iter_operations() -> Iterator[OperationDescriptor]:
    for operations in RESOURCES.values():
        yield from operations.values()


def find_operation(name: str) -> OperationDescriptor:
    resource, _sep, operation = name.partition(".")
    try:
        return RESOURCES[resource][operation]
    except KeyError:
        raise KeyError(f"unknown operation: {name}") from None
