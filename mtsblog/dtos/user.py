"""User and authentication DTOs"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from mtsblog.models.entities.base import PyObjectIdStr
from mtsblog.models.entities.user import Role


# Request bodies. Every field is optional at the schema level so that a
# missing value reaches AuthService and is reported as MissingField rather
# than as a generic validation failure; wrong types and unknown keys are
# still rejected here.


class UserCreateRequest(BaseModel):
    name: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    password: Optional[StrictStr] = None
    role: Optional[StrictStr] = None

    model_config = ConfigDict(extra="forbid")


class UserLoginRequest(BaseModel):
    email: Optional[StrictStr] = None
    password: Optional[StrictStr] = None

    model_config = ConfigDict(extra="forbid")


class RoleUpdateRequest(BaseModel):
    role: Optional[StrictStr] = None

    model_config = ConfigDict(extra="forbid")


# Responses


class UserView(BaseModel):
    """What a successful login reveals about the account."""

    name: str
    email: str
    role: Optional[Role] = None


class UserResponse(BaseModel):
    id: PyObjectIdStr = Field(..., alias="_id")
    name: str
    email: str
    role: Optional[Role] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True)


class RegisterResponse(BaseModel):
    message: str
    user_id: str = Field(..., alias="userId")

    model_config = ConfigDict(populate_by_name=True)


class LoginResponse(BaseModel):
    message: str
    user: UserView
