from importlib.metadata import version

from ._client import Client as Client
from ._client import create_client as create_client
from ._client import create_client_with as create_client_with
from ._descriptor import BodyKind as BodyKind
from ._descriptor import OperationDescriptor as OperationDescriptor
from ._descriptor import ResponseKind as ResponseKind
from ._executor import OperationExecutor as OperationExecutor
from ._oauth import StaticTokenAuthenticator as StaticTokenAuthenticator
from ._request import Credentials as Credentials


__version__ = version(__package__ or __name__)
__all__ = (
    "BodyKind",
    "Client",
    "Credentials",
    "OperationDescriptor",
    "OperationExecutor",
    "ResponseKind",
    "StaticTokenAuthenticator",
    "create_client",
    "create_client_with",
)
