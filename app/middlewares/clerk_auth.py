from typing import List, Optional
from fastapi import Request, HTTPException, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import AsyncSession
from clerk_backend_api import Clerk
from clerk_backend_api.security.types import AuthenticateRequestOptions
from httpx import Request as HttpxRequest

from app.core.config import settings
from app.database import AsyncSessionLocal
from app.models.user import User
from app.core.logger import get_logger

logger = get_logger("clerk_auth_middleware")

whitelisted_routes = [
    "/docs", "/openapi.json", "/redoc", "/favicon.ico",
]


def _unauthorized(detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": detail}
    )


class ClerkAuthMiddleware(BaseHTTPMiddleware):
    """
    Verifies the Clerk session token on every non-public request and attaches
    the matching local User to `request.state.user`, creating it on first sight.
    """

    def __init__(self, app, whitelisted_routes: List[str] = None):
        super().__init__(app)
        self.clerk_sdk = Clerk(bearer_auth=settings.CLERK_SECRET_KEY)
        self.whitelisted_routes = whitelisted_routes or []

    def _is_whitelisted(self, path: str) -> bool:
        return path == "/" or any(path.startswith(route) for route in self.whitelisted_routes)

    def _clerk_email(self, clerk_user_id: str) -> Optional[str]:
        clerk_user = self.clerk_sdk.users.get(user_id=clerk_user_id)
        if clerk_user.email_addresses:
            return clerk_user.email_addresses[0].email_address
        return None

    async def _get_or_create_user(self, db: AsyncSession, clerk_user_id: str) -> User:
        result = await db.execute(select(User).where(User.clerk_id == clerk_user_id))
        user = result.scalar_one_or_none()
        if user:
            return user

        email = self._clerk_email(clerk_user_id)

        # Re-signup after the Clerk account was deleted: relink by email
        if email:
            result = await db.execute(select(User).where(User.email == email))
            user = result.scalar_one_or_none()
            if user:
                user.clerk_id = clerk_user_id
                user.is_active = True
                user.is_deleted = False
                await db.commit()
                await db.refresh(user)
                logger.info(f"Relinked user {user.id} to Clerk ID {clerk_user_id}")
                return user

        user = User(
            clerk_id=clerk_user_id,
            email=email,
            type="user",
            is_active=True,
            is_deleted=False
        )
        db.add(user)
        await db.commit()
        await db.refresh(user)
        logger.info(f"Created user {user.id} (Clerk ID: {clerk_user_id})")
        return user

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or self._is_whitelisted(request.url.path):
            return await call_next(request)

        auth_header = request.headers.get("Authorization")
        if not auth_header or not auth_header.startswith("Bearer "):
            logger.warning(f"Missing or invalid Authorization header for: {request.url.path}")
            return _unauthorized("Missing or invalid authorization token")

        try:
            httpx_request = HttpxRequest(
                method=request.method,
                url=str(request.url),
                headers=dict(request.headers)
            )
            request_state = self.clerk_sdk.authenticate_request(
                httpx_request,
                AuthenticateRequestOptions()
            )

            if not request_state.is_signed_in:
                logger.warning(f"Invalid Clerk token: {request_state.reason}")
                return _unauthorized("Invalid authentication token")

            clerk_user_id = request_state.payload.get("sub") if request_state.payload else None
            if not clerk_user_id:
                logger.warning("No user_id in token payload")
                return _unauthorized("Invalid token payload")

            async with AsyncSessionLocal() as db:
                user = await self._get_or_create_user(db, clerk_user_id)

        except Exception as e:
            logger.error(f"Authentication error: {e}")
            return _unauthorized("Authentication failed")

        request.state.user = user
        request.state.clerk_user_id = clerk_user_id
        logger.debug(f"Authenticated user {user.id} for {request.method} {request.url.path}")

        return await call_next(request)


async def get_authenticated_user(request: Request) -> User:
    """FastAPI dependency returning the user attached by ClerkAuthMiddleware."""
    user = getattr(request.state, "user", None)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not authenticated"
        )
    return user
