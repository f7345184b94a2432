from .._descriptor import BodyKind, OperationDescriptor, ResponseKind, optional, path
from .._lib import PERMISSION_READ_SCOPES, SHARED_WRITE_SCOPES
from ..types import Permission, PermissionList


_FILE_ID = path("file_id", "fileId")
_PERMISSION_ID = path("permission_id", "permissionId")
_ALL_DRIVES = optional("supports_all_drives", "supportsAllDrives", bool)
_TEAM_DRIVES = optional("supports_team_drives", "supportsTeamDrives", bool)
_ADMIN = optional("use_domain_admin_access", "useDomainAdminAccess", bool)


create = OperationDescriptor(
    name="permissions.create",
    method="POST",
    path="files/{fileId}/permissions",
    scopes=SHARED_WRITE_SCOPES,
    query=(
        _FILE_ID,
        optional("email_message", "emailMessage"),
        optional("enforce_single_parent", "enforceSingleParent", bool),
        optional("move_to_new_owners_root", "moveToNewOwnersRoot", bool),
        optional("send_notification_email", "sendNotificationEmail", bool),
        _ALL_DRIVES,
        _TEAM_DRIVES,
        optional("transfer_ownership", "transferOwnership", bool),
        _ADMIN,
    ),
    body=BodyKind.JSON,
    shape=Permission,
)


delete = OperationDescriptor(
    name="permissions.delete",
    method="DELETE",
    path="files/{fileId}/permissions/{permissionId}",
    scopes=SHARED_WRITE_SCOPES,
    query=(_FILE_ID, _PERMISSION_ID, _ALL_DRIVES, _TEAM_DRIVES, _ADMIN),
    response=ResponseKind.EMPTY,
)


get = OperationDescriptor(
    name="permissions.get",
    method="GET",
    path="files/{fileId}/permissions/{permissionId}",
    scopes=PERMISSION_READ_SCOPES,
    query=(_FILE_ID, _PERMISSION_ID, _ALL_DRIVES, _TEAM_DRIVES, _ADMIN),
    shape=Permission,
)


list_ = OperationDescriptor(
    name="permissions.list",
    method="GET",
    path="files/{fileId}/permissions",
    scopes=PERMISSION_READ_SCOPES,
    query=(
        _FILE_ID,
        optional("include_permissions_for_view", "includePermissionsForView"),
        optional("page_size", "pageSize", int),
        optional("page_token", "pageToken"),
        _ALL_DRIVES,
        _TEAM_DRIVES,
        _ADMIN,
    ),
    shape=PermissionList,
)


update = OperationDescriptor(
    name="permissions.update",
    method="PATCH",
    path="files/{fileId}/permissions/{permissionId}",
    scopes=SHARED_WRITE_SCOPES,
    query=(
        _FILE_ID,
        _PERMISSION_ID,
        optional("remove_expiration", "removeExpiration", bool),
        _ALL_DRIVES,
        _TEAM_DRIVES,
        optional("transfer_ownership", "transferOwnership", bool),
        _ADMIN,
    ),
    body=BodyKind.JSON,
    shape=Permission,
)


OPERATIONS = {
    "create": create,
    "delete": delete,
    "get": get,
    "list": list_,
    "update": update,
}
