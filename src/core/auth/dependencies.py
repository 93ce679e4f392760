from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header

from src.core.auth.jwt import decode_token
from src.core.exceptions import AuthenticationError


@dataclass(frozen=True)
class CurrentClinician:
    """Authenticated back-office principal taken from the session token."""

    id: str
    role: str | None = None


async def get_current_clinician(
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentClinician:
    """
    Dependency to get the current clinician from a JWT bearer token.

    Clinician records live in another service; only the token is checked here.

    Usage:
        @router.get("/export")
        async def export(clinician: CurrentClinician = Depends(get_current_clinician)):
            ...
    """
    if not authorization:
        raise AuthenticationError("Unauthorized")

    if not authorization.startswith("Bearer "):
        raise AuthenticationError("Invalid authorization header format")

    token = authorization.replace("Bearer ", "", 1)

    payload = decode_token(token, token_type="access")
    return CurrentClinician(id=str(payload["sub"]), role=payload.get("role"))


ClinicianSession = Annotated[CurrentClinician, Depends(get_current_clinician)]
