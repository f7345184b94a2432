from .._descriptor import (
    BodyKind,
    OperationDescriptor,
    ResponseKind,
    optional,
    path,
    required,
)
from .._lib import DRIVE_READ_SCOPES, DRIVE_WRITE_SCOPES
from ..types import TeamDrive, TeamDriveList


_TEAM_DRIVE_ID = path("team_drive_id", "teamDriveId")
_ADMIN = optional("use_domain_admin_access", "useDomainAdminAccess", bool)


create = OperationDescriptor(
    name="teamdrives.create",
    method="POST",
    path="teamdrives",
    scopes=DRIVE_WRITE_SCOPES,
    query=(required("request_id", "requestId"),),
    body=BodyKind.JSON,
    shape=TeamDrive,
)


delete = OperationDescriptor(
    name="teamdrives.delete",
    method="DELETE",
    path="teamdrives/{teamDriveId}",
    scopes=DRIVE_WRITE_SCOPES,
    query=(_TEAM_DRIVE_ID,),
    response=ResponseKind.EMPTY,
)


get = OperationDescriptor(
    name="teamdrives.get",
    method="GET",
    path="teamdrives/{teamDriveId}",
    scopes=DRIVE_READ_SCOPES,
    query=(_TEAM_DRIVE_ID, _ADMIN),
    shape=TeamDrive,
)


list_ = OperationDescriptor(
    name="teamdrives.list",
    method="GET",
    path="teamdrives",
    scopes=DRIVE_READ_SCOPES,
    query=(
        optional("page_size", "pageSize", int),
        optional("page_token", "pageToken"),
        optional("q", "q"),
        _ADMIN,
    ),
    shape=TeamDriveList,
)


update = OperationDescriptor(
    name="teamdrives.update",
    method="PATCH",
    path="teamdrives/{teamDriveId}",
    scopes=DRIVE_WRITE_SCOPES,
    query=(_TEAM_DRIVE_ID, _ADMIN),
    body=BodyKind.JSON,
    shape=TeamDrive,
)


OPERATIONS = {
    "create": create,
    "delete": delete,
    "get": get,
    "list": list_,
    "update": update,
}
