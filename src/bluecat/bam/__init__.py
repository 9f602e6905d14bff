"""BlueCat Address Manager REST API v1 client."""

from .client import BAMClient, decode_scalar, new_session
from .endpoints import BAMEndpoints
from .options import encode_options
from .response_models import (
    APIAccessRight,
    APIData,
    APIDeploymentOption,
    APIDeploymentRole,
    APIEntity,
    APIUserDefinedField,
    ResponsePolicySearchResult,
)
from .session import BAMSession

__all__ = [
    "BAMClient",
    "BAMEndpoints",
    "BAMSession",
    "new_session",
    "decode_scalar",
    "encode_options",
    "APIEntity",
    "APIAccessRight",
    "APIData",
    "APIDeploymentOption",
    "APIDeploymentRole",
    "APIUserDefinedField",
    "ResponsePolicySearchResult",
]
