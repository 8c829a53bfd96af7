"""
Userhub - User Schemas
Pydantic schemas for route parameters, update payloads and responses
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
from datetime import datetime
from email_validator import validate_email, EmailNotValidError
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from userhub.models.user import UserRole


USER_ID_PATTERN = re.compile(r"\d+", re.ASCII)

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128


# Request schemas
class UserIdParams(BaseModel):
    """Route parameters carrying a user ID"""
    id: int

    @field_validator("id", mode="before")
    @classmethod
    def parse_id(cls, v):
        if not isinstance(v, str) or not USER_ID_PATTERN.fullmatch(v):
            raise ValueError("User ID must be a valid number")
        value = int(v, 10)
        if value <= 0:
            raise ValueError("User ID must be a positive number")
        return value


class UserUpdate(BaseModel):
    """Partial update of a user; at least one field is required"""
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        if not isinstance(v, str):
            raise ValueError("Name must be a string")
        v = v.strip()
        if len(v) < 1:
            raise ValueError("Name cannot be empty")
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(f"Name cannot exceed {NAME_MAX_LENGTH} characters")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def validate_email_address(cls, v):
        if not isinstance(v, str):
            raise ValueError("Email must be a string")
        v = v.strip().lower()
        # email_validator rejects long addresses itself, so length goes first
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Email cannot exceed {EMAIL_MAX_LENGTH} characters")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Invalid email format")
        return v

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, v):
        if not isinstance(v, str):
            raise ValueError("Password must be a string")
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        if len(v) > PASSWORD_MAX_LENGTH:
            raise ValueError(f"Password cannot exceed {PASSWORD_MAX_LENGTH} characters")
        return v

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, v):
        if v not in [r.value for r in UserRole]:
            raise ValueError('Role must be either "user" or "admin"')
        return v

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self


# Response schemas
class UserPublic(BaseModel):
    """User schema for API responses"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DeletedUser(BaseModel):
    """Summary of a deleted user"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: UserRole


class UserListResponse(BaseModel):
    message: str
    users: List[UserPublic]
    count: int


class UserResponse(BaseModel):
    message: str
    user: UserPublic


class DeletedUserResponse(BaseModel):
    message: str
    user: DeletedUser


# Structured (non-raising) parsing
@dataclass
class ParseResult:
    """Outcome of validating untrusted input"""
    success: bool
    data: Optional[Dict[str, Any]] = None
    errors: List[Dict[str, str]] = field(default_factory=list)


def format_validation_error(exc: PydanticValidationError) -> List[Dict[str, str]]:
    """
    Flatten a pydantic ValidationError into field-level messages

    Custom validator messages are reported without pydantic's
    "Value error, " prefix.
    """
    details = []
    for err in exc.errors():
        ctx_error = (err.get("ctx") or {}).get("error")
        message = str(ctx_error) if ctx_error is not None else err["msg"]
        field_name = ".".join(str(part) for part in err["loc"]) or "body"
        details.append({"field": field_name, "message": message})
    return details


def validate_user_id(params: Mapping[str, Any]) -> ParseResult:
    """Validate route params, returning the integer ID on success"""
    try:
        parsed = UserIdParams.model_validate(dict(params))
    except PydanticValidationError as e:
        return ParseResult(success=False, errors=format_validation_error(e))
    return ParseResult(success=True, data={"id": parsed.id})


def validate_user_update(body: Any) -> ParseResult:
    """Validate an update payload, keeping only the recognized fields that were sent"""
    try:
        parsed = UserUpdate.model_validate(body)
    except PydanticValidationError as e:
        return ParseResult(success=False, errors=format_validation_error(e))
    return ParseResult(success=True, data=parsed.model_dump(exclude_unset=True))
