"""Application Exceptions."""

from apps.auth_policy.application.common.exceptions.auth import (
    BadRequestError,
    InternalError,
    UnauthorizedError,
)
from apps.auth_policy.application.common.exceptions.base import ApplicationError
from apps.auth_policy.application.common.exceptions.gateway import (
    DataMapperError,
    GatewayError,
    UserRowDecodeError,
)

__all__ = [
    "ApplicationError",
    "BadRequestError",
    "UnauthorizedError",
    "InternalError",
    "GatewayError",
    "DataMapperError",
    "UserRowDecodeError",
]
