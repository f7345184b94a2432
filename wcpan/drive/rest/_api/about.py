from .._descriptor import OperationDescriptor
from .._lib import ANY_READ_SCOPES
from ..types import About


get = OperationDescriptor(
    name="about.get",
    method="GET",
    path="about",
    scopes=ANY_READ_SCOPES,
    shape=About,
)


OPERATIONS = {
    "get": get,
}
