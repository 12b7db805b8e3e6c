# Middleware package init
"""
Subscriptions API — Middleware Package
========================================

Middleware Chain (request order):
    Request → [Request ID] → [Access Logging] → Route Handler

Responses travel back in reverse: the logger sees the final status code,
and the request ID is attached to the headers last.
"""
