from .._descriptor import (
    BodyKind,
    OperationDescriptor,
    ResponseKind,
    optional,
    path,
    required,
)
from .._lib import (
    ANY_READ_SCOPES,
    COPY_SCOPES,
    DRIVE_WRITE_SCOPES,
    FILE_READ_SCOPES,
    FILE_WRITE_SCOPES,
    UPDATE_SCOPES,
)
from ..types import Channel, File, FileList, GeneratedIds


_MEDIA_UPLOAD = (("uploadType", "media"),)
_MEDIA_DOWNLOAD = (("alt", "media"),)

_FILE_ID = path("file_id", "fileId")
_ACKNOWLEDGE_ABUSE = optional("acknowledge_abuse", "acknowledgeAbuse", bool)
_ENFORCE_SINGLE_PARENT = optional("enforce_single_parent", "enforceSingleParent", bool)
_PERMISSIONS_FOR_VIEW = optional(
    "include_permissions_for_view", "includePermissionsForView"
)
_KEEP_REVISION = optional("keep_revision_forever", "keepRevisionForever", bool)
_OCR_LANGUAGE = optional("ocr_language", "ocrLanguage")
_ALL_DRIVES = optional("supports_all_drives", "supportsAllDrives", bool)
_TEAM_DRIVES = optional("supports_team_drives", "supportsTeamDrives", bool)
_INDEXABLE_TEXT = optional(
    "use_content_as_indexable_text", "useContentAsIndexableText", bool
)

_COPY_QUERY = (
    _ENFORCE_SINGLE_PARENT,
    optional("ignore_default_visibility", "ignoreDefaultVisibility", bool),
    _PERMISSIONS_FOR_VIEW,
    _KEEP_REVISION,
    _OCR_LANGUAGE,
    _ALL_DRIVES,
    _TEAM_DRIVES,
)
_CREATE_QUERY = _COPY_QUERY + (_INDEXABLE_TEXT,)
_UPDATE_QUERY = (
    _FILE_ID,
    optional("add_parents", "addParents"),
    _ENFORCE_SINGLE_PARENT,
    _PERMISSIONS_FOR_VIEW,
    _KEEP_REVISION,
    _OCR_LANGUAGE,
    optional("remove_parents", "removeParents"),
    _ALL_DRIVES,
    _TEAM_DRIVES,
    _INDEXABLE_TEXT,
)
_GET_QUERY = (
    _FILE_ID,
    _ACKNOWLEDGE_ABUSE,
    _PERMISSIONS_FOR_VIEW,
    _ALL_DRIVES,
    _TEAM_DRIVES,
)


copy = OperationDescriptor(
    name="files.copy",
    method="POST",
    path="files/{fileId}/copy",
    scopes=COPY_SCOPES,
    query=(_FILE_ID,) + _COPY_QUERY,
    body=BodyKind.JSON,
    shape=File,
)


create = OperationDescriptor(
    name="files.create",
    method="POST",
    path="files",
    scopes=FILE_WRITE_SCOPES,
    query=_CREATE_QUERY,
    body=BodyKind.JSON,
    shape=File,
)


create_upload = OperationDescriptor(
    name="files.create_upload",
    method="POST",
    path="files",
    scopes=FILE_WRITE_SCOPES,
    query=_CREATE_QUERY,
    body=BodyKind.MEDIA,
    shape=File,
    fixed_query=_MEDIA_UPLOAD,
)


delete = OperationDescriptor(
    name="files.delete",
    method="DELETE",
    path="files/{fileId}",
    scopes=FILE_WRITE_SCOPES,
    query=(_FILE_ID, _ENFORCE_SINGLE_PARENT, _ALL_DRIVES, _TEAM_DRIVES),
    response=ResponseKind.EMPTY,
)


download = OperationDescriptor(
    name="files.download",
    method="GET",
    path="files/{fileId}",
    scopes=FILE_READ_SCOPES,
    query=(_FILE_ID, _ACKNOWLEDGE_ABUSE),
    response=ResponseKind.STREAM,
    fixed_query=_MEDIA_DOWNLOAD,
)


empty_trash = OperationDescriptor(
    name="files.empty_trash",
    method="DELETE",
    path="files/trash",
    scopes=DRIVE_WRITE_SCOPES,
    query=(_ENFORCE_SINGLE_PARENT,),
    response=ResponseKind.EMPTY,
)


export = OperationDescriptor(
    name="files.export",
    method="GET",
    path="files/{fileId}/export",
    scopes=FILE_READ_SCOPES,
    query=(_FILE_ID, required("mime_type", "mimeType")),
    response=ResponseKind.STREAM,
)


generate_ids = OperationDescriptor(
    name="files.generate_ids",
    method="GET",
    path="files/generateIds",
    scopes=FILE_WRITE_SCOPES,
    query=(
        optional("count", "count", int),
        optional("space", "space"),
    ),
    shape=GeneratedIds,
)


get = OperationDescriptor(
    name="files.get",
    method="GET",
    path="files/{fileId}",
    scopes=ANY_READ_SCOPES,
    query=_GET_QUERY,
    shape=File,
)


list_ = OperationDescriptor(
    name="files.list",
    method="GET",
    path="files",
    scopes=ANY_READ_SCOPES,
    query=(
        optional("corpora", "corpora"),
        optional("corpus", "corpus"),
        optional("drive_id", "driveId"),
        optional("include_items_from_all_drives", "includeItemsFromAllDrives", bool),
        _PERMISSIONS_FOR_VIEW,
        optional("include_team_drive_items", "includeTeamDriveItems", bool),
        optional("order_by", "orderBy"),
        optional("page_size", "pageSize", int),
        optional("page_token", "pageToken"),
        optional("q", "q"),
        optional("spaces", "spaces"),
        _ALL_DRIVES,
        _TEAM_DRIVES,
        optional("team_drive_id", "teamDriveId"),
    ),
    shape=FileList,
)


update = OperationDescriptor(
    name="files.update",
    method="PATCH",
    path="files/{fileId}",
    scopes=UPDATE_SCOPES,
    query=_UPDATE_QUERY,
    body=BodyKind.JSON,
    shape=File,
)


update_upload = OperationDescriptor(
    name="files.update_upload",
    method="PATCH",
    path="files/{fileId}",
    scopes=UPDATE_SCOPES,
    query=_UPDATE_QUERY,
    body=BodyKind.MEDIA,
    shape=File,
    fixed_query=_MEDIA_UPLOAD,
)


watch = OperationDescriptor(
    name="files.watch",
    method="POST",
    path="files/{fileId}/watch",
    scopes=ANY_READ_SCOPES,
    query=_GET_QUERY,
    body=BodyKind.JSON,
    shape=Channel,
)


OPERATIONS = {
    "copy": copy,
    "create": create,
    "create_upload": create_upload,
    "delete": delete,
    "download": download,
    "empty_trash": empty_trash,
    "export": export,
    "generate_ids": generate_ids,
    "get": get,
    "list": list_,
    "update": update,
    "update_upload": update_upload,
    "watch": watch,
}
