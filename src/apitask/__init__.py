from .client import Executor
from .errors import ApiTaskError, OutcomeFailed, UnsupportedMethod
from .models import (
    Failure,
    NetworkError,
    Outcome,
    RequestDescriptor,
    StatusError,
    Success,
)
from .services import ProductService, ResourceService, UserService

__all__ = [
    "ApiTaskError",
    "Executor",
    "Failure",
    "NetworkError",
    "Outcome",
    "OutcomeFailed",
    "ProductService",
    "RequestDescriptor",
    "ResourceService",
    "StatusError",
    "Success",
    "UnsupportedMethod",
    "UserService",
]
