"""
Bookkeeper — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from bookkeeper.config import get_settings
from bookkeeper.logging_config import configure_logging
from bookkeeper.api.health import router as health_router
from bookkeeper.api.owners import router as owners_router
from bookkeeper.api.accounts import router as accounts_router
from bookkeeper.api.parties import router as parties_router
from bookkeeper.api.documents import router as documents_router

settings = get_settings()
configure_logging(settings)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Small-business bookkeeping with a double-entry general ledger",
)

# Register routers
app.include_router(health_router)
app.include_router(owners_router)
app.include_router(accounts_router)
app.include_router(parties_router)
app.include_router(documents_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("bookkeeper.main:app", host=settings.HOST, port=settings.PORT)
