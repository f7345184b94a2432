"""
Drive v3 resource shapes.

Every field is optional on the wire, so all dictionaries are declared with
`total=False`. Timestamps are RFC 3339 strings and int64 values are strings,
exactly as the API sends them.
"""

from typing import TypedDict


class User(TypedDict, total=False):
    displayName: str
    emailAddress: str
    kind: str
    me: bool
    permissionId: str
    photoLink: str


class AboutDriveThemes(TypedDict, total=False):
    backgroundImageLink: str
    colorRgb: str
    id: str


class AboutStorageQuota(TypedDict, total=False):
    limit: str
    usage: str
    usageInDrive: str
    usageInDriveTrash: str


class About(TypedDict, total=False):
    appInstalled: bool
    canCreateDrives: bool
    canCreateTeamDrives: bool
    driveThemes: list[AboutDriveThemes]
    exportFormats: dict[str, list[str]]
    folderColorPalette: list[str]
    importFormats: dict[str, list[str]]
    kind: str
    maxImportSizes: dict[str, str]
    maxUploadSize: str
    storageQuota: AboutStorageQuota
    teamDriveThemes: list[AboutDriveThemes]
    user: User


class DriveBackgroundImageFile(TypedDict, total=False):
    id: str
    width: float
    xCoordinate: float
    yCoordinate: float


class DriveCapabilities(TypedDict, total=False):
    canAddChildren: bool
    canChangeCopyRequiresWriterPermissionRestriction: bool
    canChangeDomainUsersOnlyRestriction: bool
    canChangeDriveBackground: bool
    canChangeDriveMembersOnlyRestriction: bool
    canComment: bool
    canCopy: bool
    canDeleteChildren: bool
    canDeleteDrive: bool
    canDownload: bool
    canEdit: bool
    canListChildren: bool
    canManageMembers: bool
    canReadRevisions: bool
    canRename: bool
    canRenameDrive: bool
    canShare: bool
    canTrashChildren: bool


class DriveRestrictions(TypedDict, total=False):
    adminManagedRestrictions: bool
    copyRequiresWriterPermission: bool
    domainUsersOnly: bool
    driveMembersOnly: bool


class Drive(TypedDict, total=False):
    backgroundImageFile: DriveBackgroundImageFile
    backgroundImageLink: str
    capabilities: DriveCapabilities
    colorRgb: str
    createdTime: str
    hidden: bool
    id: str
    kind: str
    name: str
    restrictions: DriveRestrictions
    themeId: str


class DriveList(TypedDict, total=False):
    drives: list[Drive]
    kind: str
    nextPageToken: str


class TeamDriveCapabilities(TypedDict, total=False):
    canAddChildren: bool
    canChangeCopyRequiresWriterPermissionRestriction: bool
    canChangeDomainUsersOnlyRestriction: bool
    canChangeTeamDriveBackground: bool
    canChangeTeamMembersOnlyRestriction: bool
    canComment: bool
    canCopy: bool
    canDeleteChildren: bool
    canDeleteTeamDrive: bool
    canDownload: bool
    canEdit: bool
    canListChildren: bool
    canManageMembers: bool
    canReadRevisions: bool
    canRemoveChildren: bool
    canRename: bool
    canRenameTeamDrive: bool
    canShare: bool
    canTrashChildren: bool


class TeamDriveRestrictions(TypedDict, total=False):
    adminManagedRestrictions: bool
    copyRequiresWriterPermission: bool
    domainUsersOnly: bool
    teamMembersOnly: bool


class TeamDrive(TypedDict, total=False):
    backgroundImageFile: DriveBackgroundImageFile
    backgroundImageLink: str
    capabilities: TeamDriveCapabilities
    colorRgb: str
    createdTime: str
    id: str
    kind: str
    name: str
    restrictions: TeamDriveRestrictions
    themeId: str


class TeamDriveList(TypedDict, total=False):
    kind: str
    nextPageToken: str
    teamDrives: list[TeamDrive]


class PermissionDetails(TypedDict, total=False):
    inherited: bool
    inheritedFrom: str
    permissionType: str
    role: str


class TeamDrivePermissionDetails(TypedDict, total=False):
    inherited: bool
    inheritedFrom: str
    role: str
    teamDrivePermissionType: str


class Permission(TypedDict, total=False):
    allowFileDiscovery: bool
    deleted: bool
    displayName: str
    domain: str
    emailAddress: str
    expirationTime: str
    id: str
    kind: str
    permissionDetails: list[PermissionDetails]
    photoLink: str
    role: str
    teamDrivePermissionDetails: list[TeamDrivePermissionDetails]
    type: str
    view: str


class PermissionList(TypedDict, total=False):
    kind: str
    nextPageToken: str
    permissions: list[Permission]


class ContentRestriction(TypedDict, total=False):
    readOnly: bool
    reason: str
    restrictingUser: User
    restrictionTime: str
    type: str


class FileCapabilities(TypedDict, total=False):
    canAddChildren: bool
    canAddFolderFromAnotherDrive: bool
    canAddMyDriveParent: bool
    canChangeCopyRequiresWriterPermission: bool
    canChangeViewersCanCopyContent: bool
    canComment: bool
    canCopy: bool
    canDelete: bool
    canDeleteChildren: bool
    canDownload: bool
    canEdit: bool
    canListChildren: bool
    canModifyContent: bool
    canModifyContentRestriction: bool
    canMoveChildrenOutOfDrive: bool
    canMoveChildrenOutOfTeamDrive: bool
    canMoveChildrenWithinDrive: bool
    canMoveChildrenWithinTeamDrive: bool
    canMoveItemIntoTeamDrive: bool
    canMoveItemOutOfDrive: bool
    canMoveItemOutOfTeamDrive: bool
    canMoveItemWithinDrive: bool
    canMoveItemWithinTeamDrive: bool
    canMoveTeamDriveItem: bool
    canReadDrive: bool
    canReadRevisions: bool
    canReadTeamDrive: bool
    canRemoveChildren: bool
    canRemoveMyDriveParent: bool
    canRename: bool
    canShare: bool
    canTrash: bool
    canTrashChildren: bool
    canUntrash: bool


class FileContentHintsThumbnail(TypedDict, total=False):
    image: str
    mimeType: str


class FileContentHints(TypedDict, total=False):
    indexableText: str
    thumbnail: FileContentHintsThumbnail


class FileImageMediaMetadataLocation(TypedDict, total=False):
    altitude: float
    latitude: float
    longitude: float


class FileImageMediaMetadata(TypedDict, total=False):
    aperture: float
    cameraMake: str
    cameraModel: str
    colorSpace: str
    exposureBias: float
    exposureMode: str
    exposureTime: float
    flashUsed: bool
    focalLength: float
    height: int
    isoSpeed: int
    lens: str
    location: FileImageMediaMetadataLocation
    maxApertureValue: float
    meteringMode: str
    rotation: int
    sensor: str
    subjectDistance: int
    time: str
    whiteBalance: str
    width: int


class FileShortcutDetails(TypedDict, total=False):
    targetId: str
    targetMimeType: str


class FileVideoMediaMetadata(TypedDict, total=False):
    durationMillis: str
    height: int
    width: int


class File(TypedDict, total=False):
    appProperties: dict[str, str]
    capabilities: FileCapabilities
    contentHints: FileContentHints
    contentRestrictions: list[ContentRestriction]
    copyRequiresWriterPermission: bool
    createdTime: str
    description: str
    driveId: str
    explicitlyTrashed: bool
    exportLinks: dict[str, str]
    fileExtension: str
    folderColorRgb: str
    fullFileExtension: str
    hasAugmentedPermissions: bool
    hasThumbnail: bool
    headRevisionId: str
    iconLink: str
    id: str
    imageMediaMetadata: FileImageMediaMetadata
    isAppAuthorized: bool
    kind: str
    lastModifyingUser: User
    mimeType: str
    modifiedByMe: bool
    modifiedByMeTime: str
    modifiedTime: str
    name: str
    originalFilename: str
    ownedByMe: bool
    owners: list[User]
    parents: list[str]
    permissionIds: list[str]
    permissions: list[Permission]
    properties: dict[str, str]
    quotaBytesUsed: str
    shared: bool
    sharedWithMeTime: str
    sharingUser: User
    shortcutDetails: FileShortcutDetails
    size: str
    spaces: list[str]
    starred: bool
    teamDriveId: str
    thumbnailLink: str
    thumbnailVersion: str
    trashed: bool
    trashedTime: str
    trashingUser: User
    version: str
    videoMediaMetadata: FileVideoMediaMetadata
    viewedByMe: bool
    viewedByMeTime: str
    viewersCanCopyContent: bool
    webContentLink: str
    webViewLink: str
    writersCanShare: bool


class FileList(TypedDict, total=False):
    files: list[File]
    incompleteSearch: bool
    kind: str
    nextPageToken: str


class GeneratedIds(TypedDict, total=False):
    ids: list[str]
    kind: str
    space: str


class Change(TypedDict, total=False):
    changeType: str
    drive: Drive
    driveId: str
    file: File
    fileId: str
    kind: str
    removed: bool
    teamDrive: TeamDrive
    teamDriveId: str
    time: str
    type: str


class ChangeList(TypedDict, total=False):
    changes: list[Change]
    kind: str
    newStartPageToken: str
    nextPageToken: str


class StartPageToken(TypedDict, total=False):
    kind: str
    startPageToken: str


class Channel(TypedDict, total=False):
    address: str
    expiration: str
    id: str
    kind: str
    params: dict[str, str]
    payload: bool
    resourceId: str
    resourceUri: str
    token: str
    type: str


class Reply(TypedDict, total=False):
    action: str
    author: User
    content: str
    createdTime: str
    deleted: bool
    htmlContent: str
    id: str
    kind: str
    modifiedTime: str


class ReplyList(TypedDict, total=False):
    kind: str
    nextPageToken: str
    replies: list[Reply]


class CommentQuotedFileContent(TypedDict, total=False):
    mimeType: str
    value: str


class Comment(TypedDict, total=False):
    anchor: str
    author: User
    content: str
    createdTime: str
    deleted: bool
    htmlContent: str
    id: str
    kind: str
    modifiedTime: str
    quotedFileContent: CommentQuotedFileContent
    replies: list[Reply]
    resolved: bool


class CommentList(TypedDict, total=False):
    comments: list[Comment]
    kind: str
    nextPageToken: str


class Revision(TypedDict, total=False):
    exportLinks: dict[str, str]
    id: str
    keepForever: bool
    kind: str
    lastModifyingUser: User
    mimeType: str
    modifiedTime: str
    originalFilename: str
    publishAuto: bool
    published: bool
    publishedLink: str
    publishedOutsideDomain: bool
    size: str


class RevisionList(TypedDict, total=False):
    kind: str
    nextPageToken: str
    revisions: list[Revision]
