from .base import BaseEntity, PyObjectId, PyObjectIdStr
from .user import ROLES, Role, User

__all__ = ["BaseEntity", "PyObjectId", "PyObjectIdStr", "ROLES", "Role", "User"]
