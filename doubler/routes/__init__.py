"""
Doubler API - API Routes Package
=================================

Route Inventory:
    - doubler.py: POST /doubler/{param1}   (double path and body parameters)
    - health.py:  GET  /health             (liveness probe)

Documentation routes (/docs, /docs/openapi.json) are served by FastAPI itself.

Routes stay thin: they bind request data, call the service, and return the
response model. Business rules live in doubler.services.
"""
