from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError

from auth.guard import AccessGuard
from companies import router as companies_router
from core import config, db, errors
from core.logging import configure_logging
from jobs import router as jobs_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(config.log_level())
    # The verification secret is read once and owned by the guard.
    app.state.access_guard = AccessGuard(
        secret_key=config.secret_key(),
        algorithm=config.jwt_algorithm(),
    )
    await db.init_pool(
        config.database_url(),
        min_size=config.pool_min_size(),
        max_size=config.pool_max_size(),
    )
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Schema violations are client errors (400), same as the other validation failures.
    return await http_exception_handler(request, errors.ValidationError(errors.error_messages(exc.errors())))


app.include_router(companies_router.router, tags=["companies"])
app.include_router(jobs_router.router, tags=["jobs"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
