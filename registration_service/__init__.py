"""
User Registration Service — root package.

This package contains the FastAPI app entry point (main.py), API routes,
the user domain model, registration use cases, infrastructure (MongoDB,
SMTP notifications) and the dependency injection container.
"""
