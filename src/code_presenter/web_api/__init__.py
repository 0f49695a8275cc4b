"""
Code Presenter Web API
======================
FastAPI-based REST API for rendering source code as HTML.

Quick Start:
    uvicorn code_presenter.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
