from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import languages, lexicon, morphology, oddity
from core.config import settings
from core.errors.handlers import register_error_handlers
from core.logging import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
from languages.russian import get_lexicon

# Initialize logging before anything else
configure_logging(
    level=settings.LOG_LEVEL,
    json_logs=settings.LOG_JSON,
)

log = get_logger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("startup", message="Dikovina API starting up")

    # Load the lexicon up front so a broken file fails at startup
    summary = get_lexicon().summary()
    log.info("lexicon_ready", **summary)

    yield

    log.info("shutdown", message="Dikovina API shutting down")


app = FastAPI(
    title="Dikovina API",
    description="Rule-based Russian noun and adjective inflection with a generator of grammatically agreeing oddities",
    version=VERSION,
    lifespan=lifespan,
)

# Register structured error handlers
register_error_handlers(app)

# Middleware (order matters: last added = first executed)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(languages.router, prefix="/api/languages", tags=["languages"])
app.include_router(morphology.router, prefix="/api/morphology", tags=["morphology"])
app.include_router(lexicon.router, prefix="/api/lexicon", tags=["lexicon"])
app.include_router(oddity.router, prefix="/api/oddity", tags=["oddity"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
