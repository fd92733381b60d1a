"""FastAPI app: /, /health, /analysis/errors, /analysis/report, /edit/fixes, /context_roots/invalidate."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import (
    analysis_router,
    context_roots_router,
    edit_router,
    health_router,
    root_router,
)
from .startup import configure_logging

app = FastAPI(
    title="String Literal Finder API",
    description="Flags string literals that should be localized and proposes ARB extraction fixes.",
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _configure_logging() -> None:
    configure_logging()


app.include_router(root_router)
app.include_router(health_router)
app.include_router(analysis_router)
app.include_router(edit_router)
app.include_router(context_roots_router)
