"""FastAPI dependencies for authentication and shared services."""

import uuid

from fastapi import Depends, Header, HTTPException, Request, status

from eventbook.services.auth import AccountService, InvalidAuthorizationHeader, InvalidTokenError
from eventbook.services.scheduling import SchedulingService


def get_accounts(request: Request) -> AccountService:
    return request.app.state.accounts


def get_scheduling(request: Request) -> SchedulingService:
    return request.app.state.scheduling


def current_user_id(
    authorization: str | None = Header(default=None),
    accounts: AccountService = Depends(get_accounts),
) -> str:
    """
    Resolve the caller's user id from the bearer token.

    Raises:
        HTTPException: 401 if the header or token is invalid,
            404 if the token's user is no longer registered
    """
    try:
        user_id = accounts.authenticate(authorization)
    except (InvalidAuthorizationHeader, InvalidTokenError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing bearer token",
        )

    if not accounts.users.exists(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return user_id


def is_valid_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True
