from .base import ErrorResponse, MessageResponse
from .blog import BlogInsertResponse, BlogUpdateResponse
from .user import (
    LoginResponse,
    RegisterResponse,
    RoleUpdateRequest,
    UserCreateRequest,
    UserLoginRequest,
    UserResponse,
    UserView,
)

__all__ = [
    "BlogInsertResponse",
    "BlogUpdateResponse",
    "ErrorResponse",
    "LoginResponse",
    "MessageResponse",
    "RegisterResponse",
    "RoleUpdateRequest",
    "UserCreateRequest",
    "UserLoginRequest",
    "UserResponse",
    "UserView",
]
