"""Profile page routes.

Registered last: ``/{profile_id}`` would otherwise shadow the other top-level
paths.
"""

from pathlib import Path

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from persona.application.usecase.profile import (
    CreateProfileRequest,
    CreateProfileUseCase,
    GetDefaultProfileUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ProfileView,
)
from persona.domain.error import NotFoundError, ValidationError

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "web" / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"], route_class=DishkaRoute)


@router.get("/")
async def landing(
    get_default_profile_use_case: FromDishka[GetDefaultProfileUseCase],
) -> Response:
    """Redirect to the earliest created profile."""
    try:
        profile = await get_default_profile_use_case.execute()
    except NotFoundError:
        return PlainTextResponse("No profiles found.", status_code=status.HTTP_404_NOT_FOUND)
    return RedirectResponse(url=f"/{profile.id}", status_code=status.HTTP_302_FOUND)


@router.get("/{profile_id}", response_class=HTMLResponse)
async def profile_page(
    profile_id: str,
    request: Request,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> Response:
    """Render a profile page.

    Malformed and unknown IDs get the same 404 response.
    """
    try:
        profile = await get_profile_use_case.execute(
            GetProfileRequest(profile_id=profile_id)
        )
    except NotFoundError:
        return PlainTextResponse("Profile not found.", status_code=status.HTTP_404_NOT_FOUND)

    return templates.TemplateResponse(
        request,
        "profile.html",
        {"profile": profile},
    )


@router.post(
    "/",
    response_model=ProfileView,
    status_code=status.HTTP_201_CREATED,
)
async def create_profile(
    request: CreateProfileRequest,
    create_profile_use_case: FromDishka[CreateProfileUseCase],
) -> ProfileView:
    """Create a profile. The image is always the shared default.

    Raises:
        HTTPException: 400 if a required text field is blank
    """
    try:
        return await create_profile_use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Failed to create profile", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create profile",
        )
