"""
ClookBook API Application Package

A personal reading tracker: accounts, books and timed reading sessions.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection (database session, current user)
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (users, books, security, rate limiting)
"""

__version__ = "0.1.0"
