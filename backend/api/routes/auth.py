from typing import Any

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_current_user, get_services
from api.errors import failure_message
from models.requests import ProfileUpdateRequest, RegisterRequest
from models.responses import (
    MessageResponse,
    ProfileResponse,
    RegisterResponse,
    StartupListResponse,
    StartupSavedResponse,
    UserSummary,
)
from services.container import Services
from services.errors import InputValidationError, NotFoundError

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse)
async def register(body: RegisterRequest, services: Services = Depends(get_services)):
    with failure_message("Registration", "Failed to register user"):
        user = await services.identity.create_user(body.email, body.password, body.name)
        await services.store.create_profile(user.uid, body.name, body.email)
        token = await services.identity.create_custom_token(user.uid)
    return RegisterResponse(
        token=token,
        user=UserSummary(uid=user.uid, email=user.email, name=user.name),
    )


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Profile", "Failed to fetch profile"):
        profile = await services.store.get_profile(user_id)
    if profile is None:
        raise NotFoundError("User profile not found")
    return ProfileResponse(profile=profile)


@router.put("/profile", response_model=MessageResponse)
async def update_profile(
    body: ProfileUpdateRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    changes = body.model_dump(exclude_none=True)
    if not changes:
        raise InputValidationError("No profile fields to update")

    with failure_message("Profile Update", "Failed to update profile"):
        await services.store.update_profile(user_id, changes)
    return MessageResponse(message="Profile updated successfully")


@router.post("/startup", response_model=StartupSavedResponse)
async def save_startup(
    startup: dict[str, Any] = Body(...),
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    if not startup:
        raise InputValidationError("Startup details must not be empty")

    with failure_message("Save Startup", "Failed to save startup"):
        startup_id = await services.store.add_startup(user_id, startup)
    return StartupSavedResponse(startup_id=startup_id)


@router.get("/startups", response_model=StartupListResponse)
async def list_startups(
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Get Startups", "Failed to fetch startups"):
        startups = await services.store.list_startups(user_id)
    return StartupListResponse(startups=startups)
