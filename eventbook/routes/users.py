"""Registration, login and health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status

from eventbook.config import API_VERSION
from eventbook.domain.models import Credentials, HealthResponse, TokenResponse
from eventbook.domain.results import RegistrationOutcome
from eventbook.routes.dependencies import get_accounts
from eventbook.services.auth import AccountService

router = APIRouter(tags=["users"])

INVALID_CREDENTIALS = "Invalid username or password"


@router.post("/users", status_code=status.HTTP_201_CREATED)
def register(body: Credentials, accounts: AccountService = Depends(get_accounts)) -> dict:
    if accounts.register(body.username, body.password) is RegistrationOutcome.DUPLICATE:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already taken")
    return {"status": "created"}


@router.post("/login", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def login(body: Credentials, accounts: AccountService = Depends(get_accounts)) -> TokenResponse:
    """Exchange credentials for a bearer token."""
    token = accounts.login(body.username, body.password)
    if token is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=INVALID_CREDENTIALS)
    return TokenResponse(token=token)


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    return HealthResponse(
        status="healthy", version=API_VERSION, storage=request.app.state.settings.storage
    )
