API_HOST = "www.googleapis.com"
API_ROOT = f"https://{API_HOST}/drive/v3/"
UPLOAD_ROOT = f"https://{API_HOST}/upload/drive/v3/"


_SCOPE_PREFIX = "https://www.googleapis.com/auth/"

SCOPE_DRIVE = _SCOPE_PREFIX + "drive"
SCOPE_APPDATA = _SCOPE_PREFIX + "drive.appdata"
SCOPE_FILE = _SCOPE_PREFIX + "drive.file"
SCOPE_METADATA = _SCOPE_PREFIX + "drive.metadata"
SCOPE_METADATA_READONLY = _SCOPE_PREFIX + "drive.metadata.readonly"
SCOPE_PHOTOS_READONLY = _SCOPE_PREFIX + "drive.photos.readonly"
SCOPE_READONLY = _SCOPE_PREFIX + "drive.readonly"
SCOPE_SCRIPTS = _SCOPE_PREFIX + "drive.scripts"


def scopes(*args: str) -> frozenset[str]:
    return frozenset(args)


# Every scope which can read metadata.
ANY_READ_SCOPES = scopes(
    SCOPE_DRIVE,
    SCOPE_APPDATA,
    SCOPE_FILE,
    SCOPE_METADATA,
    SCOPE_METADATA_READONLY,
    SCOPE_PHOTOS_READONLY,
    SCOPE_READONLY,
)
FILE_WRITE_SCOPES = scopes(SCOPE_DRIVE, SCOPE_APPDATA, SCOPE_FILE)
FILE_READ_SCOPES = scopes(SCOPE_DRIVE, SCOPE_FILE, SCOPE_READONLY)
SHARED_WRITE_SCOPES = scopes(SCOPE_DRIVE, SCOPE_FILE)
DRIVE_WRITE_SCOPES = scopes(SCOPE_DRIVE)
DRIVE_READ_SCOPES = scopes(SCOPE_DRIVE, SCOPE_READONLY)
COPY_SCOPES = scopes(SCOPE_DRIVE, SCOPE_APPDATA, SCOPE_FILE, SCOPE_PHOTOS_READONLY)
UPDATE_SCOPES = scopes(
    SCOPE_DRIVE,
    SCOPE_APPDATA,
    SCOPE_FILE,
    SCOPE_METADATA,
    SCOPE_SCRIPTS,
)
PERMISSION_READ_SCOPES = scopes(
    SCOPE_DRIVE,
    SCOPE_FILE,
    SCOPE_METADATA,
    SCOPE_METADATA_READONLY,
    SCOPE_PHOTOS_READONLY,
    SCOPE_READONLY,
)
