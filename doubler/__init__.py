"""
Doubler API - Application Package
==================================

What: A small FastAPI service exposing one transformation endpoint
      (POST /doubler/{param1}) with generated OpenAPI documentation.
Who:  Imported by uvicorn (`doubler.main:app`), by the CLI (`python -m doubler`)
      and by the test suite.

Layout:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Transformation)      │  ← Pure business rule
    ├─────────────────────────────────────┤
    │           Schemas (Data)            │  ← Pydantic models
    └─────────────────────────────────────┘

    Middleware, exception handlers and configuration are wired together by
    the application factory in doubler.main.
"""

__version__ = "1.2.3"
