import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.exceptions.handlers import (
    application_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)
from app.exceptions.errors import ApplicationException
from app.database.base import Base
from app.database.connection import engine
from app.api.v1.routes import (
    user_router,
    profile_router,
    log_router,
    plan_router,
    milestone_router,
    completion_router
)
from app.middlewares.clerk_auth import ClerkAuthMiddleware, whitelisted_routes
from app.core.config import settings
from app.core.logger import get_logger

logger = get_logger("recovery-planner")

API_VERSION = "1.0.0"
IS_DEVELOPMENT = settings.is_development


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Recovery planner API is starting...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Application database tables ensured.")
    except Exception as e:
        logger.error(f"Failed to initialize application: {e}")
        raise

    yield

    await engine.dispose()
    logger.info("Recovery planner API is shutting down...")


swagger_ui_parameters = {
    "displayRequestDuration": True,
    "persistAuthorization": IS_DEVELOPMENT,
}

app = FastAPI(
    title="Shoulder Recovery Planner",
    version=API_VERSION,
    lifespan=lifespan,
    description="""
    Recovery planning API for shoulder injuries.

    Daily check-ins (pain, instability, range of motion) drive the recovery
    stage, the permitted activities, a rehab session and a weekly fitness plan.

    ## Authentication

    Uses Clerk JWT tokens. Include your token in the Authorization header:
    ```
    Authorization: Bearer <your-jwt-token>
    ```
    """,
    swagger_ui_parameters=swagger_ui_parameters,
    openapi_components={
        "securitySchemes": {
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "bearerFormat": "JWT",
                "description": "JWT token from Clerk authentication"
            }
        }
    },
    openapi_security=[{"BearerAuth": []}]
)

origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:8000",
    "http://127.0.0.1:8000",
]

app.add_middleware(
    ClerkAuthMiddleware,
    whitelisted_routes=whitelisted_routes
)

# Added last so it wraps auth and 401s still carry CORS headers
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(user_router, prefix="/api/v1")
app.include_router(profile_router, prefix="/api/v1")
app.include_router(log_router, prefix="/api/v1")
app.include_router(plan_router, prefix="/api/v1")
app.include_router(milestone_router, prefix="/api/v1")
app.include_router(completion_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root():
    return {
        "message": "Shoulder Recovery Planner API",
        "docs": "/docs",
        "development_mode": IS_DEVELOPMENT,
        "version": API_VERSION
    }


@app.middleware("http")
async def catch_all_404_middleware(request: Request, call_next):
    response = await call_next(request)
    if response.status_code == 404 and not response.headers.get("content-type", "").startswith("application/json"):
        return JSONResponse(
            status_code=404,
            content={"error": "Route not found", "path": str(request.url.path)}
        )
    return response


app.add_exception_handler(ApplicationException, application_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=IS_DEVELOPMENT,
        limit_concurrency=20,
        timeout_keep_alive=30,
        timeout_graceful_shutdown=30
    )
