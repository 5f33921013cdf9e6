from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from athletes import router as athletes_router
from competitions import router as competitions_router
from core import db, errors, settings
from core.logger import configure_logging, uvicorn_log_config
from events import router as events_router
from news import router as news_router

configure_logging(settings.log_level())


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process; requests borrow connections from it.
    app.state.db_pool = await db.create_pool()
    try:
        yield
    finally:
        await db.close_pool(app.state.db_pool)
        app.state.db_pool = None


app = FastAPI(
    title="Sports API",
    description="CRUD endpoints for athletes, events, competitions and news.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api-docs",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.register_exception_handlers(app)

app.include_router(athletes_router.router, prefix="/api", tags=["athletes"])
app.include_router(events_router.router, prefix="/api", tags=["events"])
app.include_router(competitions_router.router, prefix="/api", tags=["competitions"])
app.include_router(news_router.router, prefix="/api", tags=["news"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "sports api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host(),
        port=settings.port(),
        log_config=uvicorn_log_config(),
    )
