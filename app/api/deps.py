from typing import AsyncGenerator, Annotated, Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import settings
from app.core.errors import UnauthorizedException
from app.core.security import ADMIN_SUBJECT
from app.db.session import async_session
from app.schemas.token import TokenPayload

admin_bearer = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        yield session

SessionDep = Annotated[AsyncSession, Depends(get_db)]
CredentialsDep = Annotated[Optional[HTTPAuthorizationCredentials], Depends(admin_bearer)]


async def get_current_admin(credentials: CredentialsDep) -> str:
    if credentials is None:
        raise UnauthorizedException(detail="Admin authentication required")
    try:
        payload = jwt.decode(
            credentials.credentials, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
        token_data = TokenPayload(**payload)
    except (JWTError, ValidationError):
        raise UnauthorizedException(detail="Invalid or expired admin token")
    if token_data.sub != ADMIN_SUBJECT:
        raise UnauthorizedException(detail="Invalid or expired admin token")
    return token_data.sub

CurrentAdmin = Annotated[str, Depends(get_current_admin)]
