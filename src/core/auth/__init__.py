from src.core.auth.jwt import create_access_token, decode_token
from src.core.auth.dependencies import ClinicianSession, CurrentClinician, get_current_clinician

__all__ = [
    "create_access_token",
    "decode_token",
    "ClinicianSession",
    "CurrentClinician",
    "get_current_clinician",
]
