from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from screenlist.database import get_db
from screenlist.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from screenlist.services import accounts
from screenlist.services.identity import create_access_token

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(data: RegisterRequest, db: AsyncSession = Depends(get_db)):
    user = await accounts.register(db, data.username, data.email, data.password)
    return AuthResponse(
        user=UserResponse.model_validate(user),
        token=create_access_token(user.id),
    )


@router.post("/login", response_model=AuthResponse)
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await accounts.authenticate(db, data.email, data.password)
    return AuthResponse(
        user=UserResponse.model_validate(user),
        token=create_access_token(user.id),
    )
