from wcpan.drive.core.exceptions import DriveError


class ApiError(DriveError):
    pass


class AuthError(ApiError):
    pass


class HttpError(ApiError):
    def __init__(self, status: int) -> None:
        super().__init__(f"HTTP {status}")
        self.status = status


class DecodeError(ApiError):
    pass


class SinkError(ApiError):
    pass


class TransportError(ApiError):
    pass


class InputDataError(ApiError, ValueError):
    pass


class CredentialFileError(ApiError):
    pass


class TokenFileError(ApiError):
    pass
