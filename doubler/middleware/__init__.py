"""
Doubler API - Middleware Package
=================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [GZip] → Route Handler

    1. Request ID: correlation ID for logs, error bodies and the response header
    2. Logging: one access line per request, tagged with the request ID
    3. GZip: FastAPI's GZipMiddleware compresses large responses

Responses travel the chain in reverse, so the logged status and duration
cover everything downstream of the logger.
"""
