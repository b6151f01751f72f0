# Middleware package init
"""
QuickNotes Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for log lines and error bodies
    2. Logging: method, path, status and duration, tagged with the request ID
    3. GZip / CORS: provided by FastAPI
"""
