"""User registration, login and role management endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from mtsblog.api.deps import get_auth_service
from mtsblog.dtos import (
    LoginResponse,
    MessageResponse,
    RegisterResponse,
    RoleUpdateRequest,
    UserCreateRequest,
    UserLoginRequest,
    UserResponse,
)
from mtsblog.services import AuthService

router = APIRouter()


@router.post(
    "/users",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_user(
    payload: UserCreateRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Register a user; the password is stored only as a bcrypt hash."""
    user_id = service.register(
        payload.name, payload.email, payload.password, payload.role
    )
    return RegisterResponse(message="User registered successfully", user_id=user_id)


@router.post("/login", response_model=LoginResponse)
def login(
    payload: UserLoginRequest,
    service: AuthService = Depends(get_auth_service),
):
    user = service.login(payload.email, payload.password)
    return LoginResponse(message="Login successful", user=user)


@router.get("/users", response_model=List[UserResponse])
def list_users(service: AuthService = Depends(get_auth_service)):
    return service.list_users()


@router.put("/users/{user_id}/role", response_model=MessageResponse)
def update_user_role(
    user_id: str,
    payload: RoleUpdateRequest,
    service: AuthService = Depends(get_auth_service),
):
    service.update_role(user_id, payload.role)
    return MessageResponse(message="User role updated")
