"""
FastAPI Application
==================
Main entry point for the Code Presenter API.

Run with:
    uvicorn code_presenter.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from code_presenter import __version__
from code_presenter.web_api.config import settings
from code_presenter.web_api.routers import health, presets, render

# Create application
app = FastAPI(
    title="Code Presenter API",
    description="Syntax-highlighted, reflowed HTML rendering of source code",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(render.router, prefix="/render", tags=["Render"])
app.include_router(presets.router, prefix="/presets", tags=["Presets"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Code Presenter API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m code_presenter.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
