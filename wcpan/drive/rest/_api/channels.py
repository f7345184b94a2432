from .._descriptor import BodyKind, OperationDescriptor, ResponseKind
from .._lib import ANY_READ_SCOPES


stop = OperationDescriptor(
    name="channels.stop",
    method="POST",
    path="channels/stop",
    scopes=ANY_READ_SCOPES,
    body=BodyKind.JSON,
    response=ResponseKind.EMPTY,
)


OPERATIONS = {
    "stop": stop,
}
