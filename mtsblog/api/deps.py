"""FastAPI dependency providers for repositories and services."""

from fastapi import Depends
from pymongo.database import Database

from mtsblog.core.security import PasswordHasher, get_password_hasher
from mtsblog.database.mongo import get_db
from mtsblog.repositories import BlogRepository, UserRepository
from mtsblog.services import AuthService


def get_user_repository(db: Database = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_blog_repository(db: Database = Depends(get_db)) -> BlogRepository:
    return BlogRepository(db)


def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(users, hasher)
