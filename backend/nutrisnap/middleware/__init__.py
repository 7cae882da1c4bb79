"""
NutriSnap Backend - Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Rate Limit] → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Rate Limit first: rejected requests cost nothing downstream
    2. Request ID: correlation ID available to everything after it
    3. Logging: access line carries the request ID, status and duration
"""
