from asyncio import Condition
from collections.abc import Iterable
from contextlib import asynccontextmanager
from logging import getLogger
from pathlib import Path
from typing import Any, TypedDict
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse
import json

from aiohttp import ClientSession

from ._lib import SCOPE_DRIVE
from ._request import Credentials
from .exceptions import AuthError, CredentialFileError, TokenFileError


OAUTH_TOKEN_VERSION = 1
_FORM_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded",
}


class OAuth2Config(TypedDict):
    client_id: str
    client_secret: str
    redirect_uri: str
    auth_uri: str
    token_uri: str


class OAuth2Token(TypedDict):
    access_token: str
    refresh_token: str


class OAuth2Storage:
    """
    Reads the client secret and keeps the OAuth token on disk.

    The client secret is the `web` JSON file downloaded from the Google API
    console. The token file is written by this class only.
    """

    def __init__(
        self,
        *,
        client_secret: Path,
        oauth_token: Path,
    ) -> None:
        self._client_secret = client_secret
        self._oauth_token = oauth_token

    def load_oauth2_config(self) -> OAuth2Config:
        with self._client_secret.open("r") as fin:
            try:
                config = json.load(fin)
            except json.JSONDecodeError as e:
                raise CredentialFileError("credential file is not JSON") from e

        if not isinstance(config, dict) or "web" not in config:
            raise CredentialFileError(
                "credential file not supported (only supports `web`)"
            )

        try:
            return _load_web(config["web"])
        except (KeyError, IndexError, TypeError) as e:
            raise CredentialFileError("incomplete `web` credential") from e

    def load_oauth2_token(self) -> OAuth2Token:
        if not self._oauth_token.is_file():
            return {
                "access_token": "",
                "refresh_token": "",
            }

        with self._oauth_token.open("r") as fin:
            try:
                token = json.load(fin)
            except json.JSONDecodeError as e:
                raise TokenFileError("token file is not JSON") from e

        version = token.get("version", 0)
        if version != OAUTH_TOKEN_VERSION:
            raise TokenFileError(f"invalid token version: {version}")
        try:
            return {
                "access_token": token["access_token"],
                "refresh_token": token["refresh_token"],
            }
        except KeyError as e:
            raise TokenFileError("invalid token format") from e

    def save_oauth2_token(
        self,
        access_token: str,
        refresh_token: str,
    ) -> None:
        token = {
            "version": OAUTH_TOKEN_VERSION,
            "access_token": access_token,
            "refresh_token": refresh_token,
        }
        with self._oauth_token.open("w") as fout:
            json.dump(token, fout)


class OAuth2Manager:
    """
    Owns the cached access token.

    Concurrent refreshes are collapsed into one request to the token endpoint;
    the other callers wait for its outcome.
    """

    def __init__(self, storage: OAuth2Storage) -> None:
        self._storage = storage
        self._lock = Condition()
        self._refreshing = False
        self._error = False
        self._oauth2_config: OAuth2Config = self._storage.load_oauth2_config()
        self._oauth2_token: OAuth2Token = self._storage.load_oauth2_token()

    @property
    def access_token(self) -> str | None:
        return self._oauth2_token.get("access_token", None)

    @property
    def refresh_token(self) -> str | None:
        return self._oauth2_token.get("refresh_token", None)

    def build_authorization_url(self, scopes: Iterable[str] | None = None) -> str:
        if scopes is None:
            scopes = [SCOPE_DRIVE]
        kwargs = {
            "redirect_uri": self._oauth2_config["redirect_uri"],
            "client_id": self._oauth2_config["client_id"],
            "response_type": "code",
            # Essential for getting refresh token.
            "access_type": "offline",
            # Essential for getting refresh token **everytime**.
            # See https://github.com/googleapis/google-api-python-client/issues/213 .
            "prompt": "consent",
            "scope": " ".join(scopes),
        }
        url = urlparse(self._oauth2_config["auth_uri"])
        return urlunparse(url._replace(query=urlencode(kwargs)))

    async def accept_code(self, session: ClientSession, code: str) -> None:
        code = _parse_authorized_code(code)
        body = {
            "redirect_uri": self._oauth2_config["redirect_uri"],
            "code": code,
            "client_id": self._oauth2_config["client_id"],
            "client_secret": self._oauth2_config["client_secret"],
            "grant_type": "authorization_code",
        }
        try:
            token = await self._post_token(session, body)
        except Exception as e:
            raise AuthError("failed to exchange authorization code") from e
        self._save_token(token)
        getLogger(__name__).debug("accepted authorization code")

    async def get_access_token(self, session: ClientSession) -> str:
        if self._refreshing:
            await self._wait_refresh()
        elif not self.access_token:
            await self.renew(session)

        if self._error:
            raise AuthError("last token refresh failed")
        if not self.access_token:
            raise AuthError("not authorized")
        return self.access_token

    async def renew(self, session: ClientSession) -> None:
        if self._refreshing:
            await self._wait_refresh()
            return

        if not self.refresh_token:
            raise AuthError("no refresh token, authorize first")

        async with self._guard():
            try:
                await self._refresh(session)
            except Exception as e:
                getLogger(__name__).exception("error on refresh token")
                self._error = True
                raise AuthError("failed to refresh access token") from e
            self._error = False

        getLogger(__name__).debug("refresh access token")

    @asynccontextmanager
    async def _guard(self):
        self._refreshing = True
        try:
            yield
        finally:
            self._refreshing = False
            async with self._lock:
                self._lock.notify_all()

    async def _wait_refresh(self) -> None:
        async with self._lock:
            await self._lock.wait_for(lambda: not self._refreshing)

    async def _refresh(self, session: ClientSession) -> None:
        body = {
            "client_id": self._oauth2_config["client_id"],
            "client_secret": self._oauth2_config["client_secret"],
            "refresh_token": self.refresh_token,
            "grant_type": "refresh_token",
        }
        token = await self._post_token(session, body)
        self._save_token(token)

    async def _post_token(
        self, session: ClientSession, body: dict[str, Any]
    ) -> dict[str, str]:
        async with session.post(
            self._oauth2_config["token_uri"],
            headers=_FORM_HEADERS,
            data=urlencode(body),
        ) as response:
            response.raise_for_status()
            return await response.json()

    def _save_token(self, token: dict[str, str]) -> None:
        self._oauth2_token["access_token"] = token["access_token"]
        if "refresh_token" in token:
            self._oauth2_token["refresh_token"] = token["refresh_token"]
        self._storage.save_oauth2_token(
            self._oauth2_token["access_token"],
            self._oauth2_token.get("refresh_token", ""),
        )


class OAuth2Authenticator:
    """Authenticator backed by an `OAuth2Manager` and an aiohttp session."""

    def __init__(self, manager: OAuth2Manager, session: ClientSession) -> None:
        self._manager = manager
        self._session = session

    @property
    def manager(self) -> OAuth2Manager:
        return self._manager

    async def acquire(self, scopes: frozenset[str]) -> Credentials:
        token = await self._manager.get_access_token(self._session)
        return Credentials(token=token, scopes=scopes)

    async def renew(self) -> None:
        await self._manager.renew(self._session)


class StaticTokenAuthenticator:
    def __init__(self, token: str) -> None:
        if not token:
            raise ValueError("token must not be empty")
        self._token = token

    async def acquire(self, scopes: frozenset[str]) -> Credentials:
        return Credentials(token=self._token, scopes=scopes)


def _load_web(web: dict[str, Any]) -> OAuth2Config:
    return {
        "client_id": web["client_id"],
        "client_secret": web["client_secret"],
        "redirect_uri": web["redirect_uris"][0],
        "auth_uri": web["auth_uri"],
        "token_uri": web["token_uri"],
    }


def _parse_authorized_code(code: str) -> str:
    if not code.startswith("http"):
        return code

    params = parse_qs(urlparse(code).query)
    try:
        return params["code"][0]
    except (KeyError, IndexError) as e:
        raise AuthError("no `code` in the redirected URL") from e
