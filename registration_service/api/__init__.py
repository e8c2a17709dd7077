"""
API layer for the User Registration Service.

Exposes HTTP endpoints under /api/v1 (auth: register, login, me, email change)
and a health check.
"""
