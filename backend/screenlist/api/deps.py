from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from screenlist.services.identity import verify_token

# auto_error=False so a missing header is reported as 401 by verify_token,
# not as FastAPI's default 403.
bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> int:
    return verify_token(credentials.credentials if credentials else None)
