from .._descriptor import BodyKind, OperationDescriptor, ResponseKind, optional, path
from .._lib import ANY_READ_SCOPES, FILE_WRITE_SCOPES
from ..types import Revision, RevisionList


_FILE_ID = path("file_id", "fileId")
_REVISION_ID = path("revision_id", "revisionId")


delete = OperationDescriptor(
    name="revisions.delete",
    method="DELETE",
    path="files/{fileId}/revisions/{revisionId}",
    scopes=FILE_WRITE_SCOPES,
    query=(_FILE_ID, _REVISION_ID),
    response=ResponseKind.EMPTY,
)


get = OperationDescriptor(
    name="revisions.get",
    method="GET",
    path="files/{fileId}/revisions/{revisionId}",
    scopes=ANY_READ_SCOPES,
    query=(
        _FILE_ID,
        _REVISION_ID,
        optional("acknowledge_abuse", "acknowledgeAbuse", bool),
    ),
    shape=Revision,
)


list_ = OperationDescriptor(
    name="revisions.list",
    method="GET",
    path="files/{fileId}/revisions",
    scopes=ANY_READ_SCOPES,
    query=(
        _FILE_ID,
        optional("page_size", "pageSize", int),
        optional("page_token", "pageToken"),
    ),
    shape=RevisionList,
)


update = OperationDescriptor(
    name="revisions.update",
    method="PATCH",
    path="files/{fileId}/revisions/{revisionId}",
    scopes=FILE_WRITE_SCOPES,
    query=(_FILE_ID, _REVISION_ID),
    body=BodyKind.JSON,
    shape=Revision,
)


OPERATIONS = {
    "delete": delete,
    "get": get,
    "list": list_,
    "update": update,
}
