from .._descriptor import (
    BodyKind,
    OperationDescriptor,
    ResponseKind,
    optional,
    path,
    required,
)
from .._lib import DRIVE_READ_SCOPES, DRIVE_WRITE_SCOPES
from ..types import Drive, DriveList


_DRIVE_ID = path("drive_id", "driveId")
_ADMIN = optional("use_domain_admin_access", "useDomainAdminAccess", bool)


create = OperationDescriptor(
    name="drives.create",
    method="POST",
    path="drives",
    scopes=DRIVE_WRITE_SCOPES,
    query=(required("request_id", "requestId"),),
    body=BodyKind.JSON,
    shape=Drive,
)


delete = OperationDescriptor(
    name="drives.delete",
    method="DELETE",
    path="drives/{driveId}",
    scopes=DRIVE_WRITE_SCOPES,
    query=(_DRIVE_ID,),
    response=ResponseKind.EMPTY,
)


get = OperationDescriptor(
    name="drives.get",
    method="GET",
    path="drives/{driveId}",
    scopes=DRIVE_READ_SCOPES,
    query=(_DRIVE_ID, _ADMIN),
    shape=Drive,
)


hide = OperationDescriptor(
    name="drives.hide",
    method="POST",
    path="drives/{driveId}/hide",
    scopes=DRIVE_WRITE_SCOPES,
    query=(_DRIVE_ID,),
    shape=Drive,
)


list_ = OperationDescriptor(
    name="drives.list",
    method="GET",
    path="drives",
    scopes=DRIVE_READ_SCOPES,
    query=(
        optional("page_size", "pageSize", int),
        optional("page_token", "pageToken"),
        optional("q", "q"),
        _ADMIN,
    ),
    shape=DriveList,
)


unhide = OperationDescriptor(
    name="drives.unhide",
    method="POST",
    path="drives/{driveId}/unhide",
    scopes=DRIVE_WRITE_SCOPES,
    query=(_DRIVE_ID,),
    shape=Drive,
)


update = OperationDescriptor(
    name="drives.update",
    method="PATCH",
    path="drives/{driveId}",
    scopes=DRIVE_WRITE_SCOPES,
    query=(_DRIVE_ID, _ADMIN),
    body=BodyKind.JSON,
    shape=Drive,
)


OPERATIONS = {
    "create": create,
    "delete": delete,
    "get": get,
    "hide": hide,
    "list": list_,
    "unhide": unhide,
    "update": update,
}
