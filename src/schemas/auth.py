# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""

from pydantic import BaseModel, Field

from src.schemas.user import UserCreate, UserResponse


class LoginRequest(BaseModel):
    """Login credentials."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(UserCreate):
    """Self-service registration request."""

    full_name: str | None = Field(None, max_length=200)


class AuthResponse(BaseModel):
    """Response carrying the authenticated user."""

    user: UserResponse
