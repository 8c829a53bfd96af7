"""
Userhub - User Management Endpoints
List, fetch, update and delete users
"""
from typing import Any, Optional
from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from userhub.core.database import get_db
from userhub.core.errors import ConflictError, UserhubError, ValidationError
from userhub.auth.dependencies import get_current_caller
from userhub.auth.policy import Action, Caller, authorize
from userhub.schemas.user import (
    DeletedUser,
    DeletedUserResponse,
    ParseResult,
    UserListResponse,
    UserPublic,
    UserResponse,
    validate_user_id,
    validate_user_update,
)
from userhub.services.user_service import UserService


router = APIRouter()

VALIDATION_FAILED = "Validation failed."


def _require_valid(result: ParseResult) -> dict:
    """Return parsed data or raise a 400 with field details"""
    if not result.success:
        raise ValidationError(VALIDATION_FAILED, details=result.errors)
    return result.data


def _enforce(caller: Caller, target_id: int, action: Action, updates: Optional[dict] = None) -> None:
    decision = authorize(caller, target_id, action, updates)
    if not decision.allowed:
        logger.warning(
            f"⚠️ {caller.email} denied {action.value} on user {target_id}: {decision.reason}"
        )
        raise decision.to_error()


@router.get("/users", response_model=UserListResponse)
async def fetch_all_users(
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller)
):
    """Lista di tutti gli utenti"""
    logger.info("Getting users ...")

    users = await UserService.get_all_users(db)

    return UserListResponse(
        message="Successfully retrieved all users",
        users=[UserPublic.model_validate(u) for u in users],
        count=len(users),
    )


@router.get("/users/{user_id}", response_model=UserResponse)
async def fetch_user_by_id(
    user_id: str,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller)
):
    """Dettagli di un utente"""
    target_id = _require_valid(validate_user_id({"id": user_id}))["id"]
    logger.info(f"Getting user with ID: {target_id}")

    try:
        user = await UserService.get_user_by_id(db, target_id)
    except UserhubError as e:
        logger.error(f"❌ Error fetching user: {e.message}")
        raise

    return UserResponse(
        message="Successfully retrieved user",
        user=UserPublic.model_validate(user),
    )


@router.api_route("/users/{user_id}", methods=["PUT", "PATCH"], response_model=UserResponse)
async def update_user_by_id(
    user_id: str,
    payload: Any = Body(default=None),
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller)
):
    """
    Aggiorna un utente

    - USER: solo il proprio profilo, senza cambiare ruolo
    - ADMIN: qualsiasi utente, incluso il ruolo
    """
    target_id = _require_valid(validate_user_id({"id": user_id}))["id"]
    updates = _require_valid(validate_user_update(payload))

    _enforce(caller, target_id, Action.UPDATE, updates)

    logger.info(f"Updating user with ID: {target_id}")

    try:
        user = await UserService.update_user(db, target_id, updates)
    except ConflictError as e:
        logger.error(f"❌ Error updating user: {e.message}")
        raise ConflictError("Email already exists")
    except UserhubError as e:
        logger.error(f"❌ Error updating user: {e.message}")
        raise

    return UserResponse(
        message="Successfully updated user",
        user=UserPublic.model_validate(user),
    )


@router.delete("/users/{user_id}", response_model=DeletedUserResponse)
async def delete_user_by_id(
    user_id: str,
    db: AsyncSession = Depends(get_db),
    caller: Caller = Depends(get_current_caller)
):
    """
    Elimina un utente

    - USER: solo il proprio account
    - ADMIN: qualsiasi account tranne il proprio
    """
    target_id = _require_valid(validate_user_id({"id": user_id}))["id"]

    _enforce(caller, target_id, Action.DELETE)

    logger.info(f"Deleting user with ID: {target_id}")

    try:
        user = await UserService.delete_user(db, target_id)
    except UserhubError as e:
        logger.error(f"❌ Error deleting user: {e.message}")
        raise

    return DeletedUserResponse(
        message="Successfully deleted user",
        user=DeletedUser.model_validate(user),
    )
