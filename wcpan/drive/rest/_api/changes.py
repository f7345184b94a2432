from .._descriptor import BodyKind, OperationDescriptor, optional, required
from .._lib import ANY_READ_SCOPES
from ..types import ChangeList, Channel, StartPageToken


_LIST_QUERY = (
    optional("drive_id", "driveId"),
    optional("include_corpus_removals", "includeCorpusRemovals", bool),
    optional("include_items_from_all_drives", "includeItemsFromAllDrives", bool),
    optional("include_permissions_for_view", "includePermissionsForView"),
    optional("include_removed", "includeRemoved", bool),
    optional("include_team_drive_items", "includeTeamDriveItems", bool),
    optional("page_size", "pageSize", int),
    optional("restrict_to_my_drive", "restrictToMyDrive", bool),
    optional("spaces", "spaces"),
    optional("supports_all_drives", "supportsAllDrives", bool),
    optional("supports_team_drives", "supportsTeamDrives", bool),
    optional("team_drive_id", "teamDriveId"),
    required("page_token", "pageToken"),
)


get_start_page_token = OperationDescriptor(
    name="changes.get_start_page_token",
    method="GET",
    path="changes/startPageToken",
    scopes=ANY_READ_SCOPES,
    query=(
        optional("drive_id", "driveId"),
        optional("supports_all_drives", "supportsAllDrives", bool),
        optional("supports_team_drives", "supportsTeamDrives", bool),
        optional("team_drive_id", "teamDriveId"),
    ),
    shape=StartPageToken,
)


list_ = OperationDescriptor(
    name="changes.list",
    method="GET",
    path="changes",
    scopes=ANY_READ_SCOPES,
    query=_LIST_QUERY,
    shape=ChangeList,
)


watch = OperationDescriptor(
    name="changes.watch",
    method="POST",
    path="changes/watch",
    scopes=ANY_READ_SCOPES,
    query=_LIST_QUERY,
    body=BodyKind.JSON,
    shape=Channel,
)


OPERATIONS = {
    "get_start_page_token": get_start_page_token,
    "list": list_,
    "watch": watch,
}
