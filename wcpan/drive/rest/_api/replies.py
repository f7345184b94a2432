from .._descriptor import BodyKind, OperationDescriptor, ResponseKind, optional, path
from .._lib import FILE_READ_SCOPES, SHARED_WRITE_SCOPES
from ..types import Reply, ReplyList


_FILE_ID = path("file_id", "fileId")
_COMMENT_ID = path("comment_id", "commentId")
_REPLY_ID = path("reply_id", "replyId")
_INCLUDE_DELETED = optional("include_deleted", "includeDeleted", bool)


create = OperationDescriptor(
    name="replies.create",
    method="POST",
    path="files/{fileId}/comments/{commentId}/replies",
    scopes=SHARED_WRITE_SCOPES,
    query=(_FILE_ID, _COMMENT_ID),
    body=BodyKind.JSON,
    shape=Reply,
)


delete = OperationDescriptor(
    name="replies.delete",
    method="DELETE",
    path="files/{fileId}/comments/{commentId}/replies/{replyId}",
    scopes=SHARED_WRITE_SCOPES,
    query=(_FILE_ID, _COMMENT_ID, _REPLY_ID),
    response=ResponseKind.EMPTY,
)


get = OperationDescriptor(
    name="replies.get",
    method="GET",
    path="files/{fileId}/comments/{commentId}/replies/{replyId}",
    scopes=FILE_READ_SCOPES,
    query=(_FILE_ID, _COMMENT_ID, _REPLY_ID, _INCLUDE_DELETED),
    shape=Reply,
)


list_ = OperationDescriptor(
    name="replies.list",
    method="GET",
    path="files/{fileId}/comments/{commentId}/replies",
    scopes=FILE_READ_SCOPES,
    query=(
        _FILE_ID,
        _COMMENT_ID,
        _INCLUDE_DELETED,
        optional("page_size", "pageSize", int),
        optional("page_token", "pageToken"),
    ),
    shape=ReplyList,
)


update = OperationDescriptor(
    name="replies.update",
    method="PATCH",
    path="files/{fileId}/comments/{commentId}/replies/{replyId}",
    scopes=SHARED_WRITE_SCOPES,
    query=(_FILE_ID, _COMMENT_ID, _REPLY_ID),
    body=BodyKind.JSON,
    shape=Reply,
)


OPERATIONS = {
    "create": create,
    "delete": delete,
    "get": get,
    "list": list_,
    "update": update,
}
