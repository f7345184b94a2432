from .._descriptor import BodyKind, OperationDescriptor, ResponseKind, optional, path
from .._lib import FILE_READ_SCOPES, SHARED_WRITE_SCOPES
from ..types import Comment, CommentList


_FILE_ID = path("file_id", "fileId")
_COMMENT_ID = path("comment_id", "commentId")


create = OperationDescriptor(
    name="comments.create",
    method="POST",
    path="files/{fileId}/comments",
    scopes=SHARED_WRITE_SCOPES,
    query=(_FILE_ID,),
    body=BodyKind.JSON,
    shape=Comment,
)


delete = OperationDescriptor(
    name="comments.delete",
    method="DELETE",
    path="files/{fileId}/comments/{commentId}",
    scopes=SHARED_WRITE_SCOPES,
    query=(_FILE_ID, _COMMENT_ID),
    response=ResponseKind.EMPTY,
)


get = OperationDescriptor(
    name="comments.get",
    method="GET",
    path="files/{fileId}/comments/{commentId}",
    scopes=FILE_READ_SCOPES,
    query=(
        _FILE_ID,
        _COMMENT_ID,
        optional("include_deleted", "includeDeleted", bool),
    ),
    shape=Comment,
)


list_ = OperationDescriptor(
    name="comments.list",
    method="GET",
    path="files/{fileId}/comments",
    scopes=FILE_READ_SCOPES,
    query=(
        _FILE_ID,
        optional("include_deleted", "includeDeleted", bool),
        optional("page_size", "pageSize", int),
        optional("page_token", "pageToken"),
        optional("start_modified_time", "startModifiedTime"),
    ),
    shape=CommentList,
)


update = OperationDescriptor(
    name="comments.update",
    method="PATCH",
    path="files/{fileId}/comments/{commentId}",
    scopes=SHARED_WRITE_SCOPES,
    query=(_FILE_ID, _COMMENT_ID),
    body=BodyKind.JSON,
    shape=Comment,
)


OPERATIONS = {
    "create": create,
    "delete": delete,
    "get": get,
    "list": list_,
    "update": update,
}
