from .clients import DBaaSAPI, get_dbaas_client, new_dbaas_client
from .core import APP_VERSION as __version__
from .errors import (
    APIError,
    BadRequestError,
    DBaaSError,
    DecodeError,
    ErrorCategory,
    InvalidIDError,
    NotFoundError,
    ServiceError,
    TransportError,
)
from .schemas.common import DiskType, Status

__all__ = [
    "APIError",
    "BadRequestError",
    "DBaaSAPI",
    "DBaaSError",
    "DecodeError",
    "DiskType",
    "ErrorCategory",
    "InvalidIDError",
    "NotFoundError",
    "ServiceError",
    "Status",
    "TransportError",
    "__version__",
    "get_dbaas_client",
    "new_dbaas_client",
]
