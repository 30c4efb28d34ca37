# Middleware package init
"""
Bookstore Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate (or accept) a correlation ID for logs and errors
    2. Logging: One access-log line per request, tagged with the request ID
    3. GZip / CORS: FastAPI's stock middleware

    Responses travel the chain in reverse, so the X-Request-ID header is set
    on every response and the access log sees the final status code.
"""
