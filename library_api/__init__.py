"""
Library API Application Package

REST service managing authors and the books they wrote.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine and session management
- exceptions.py: Domain errors raised by the record stores
- main.py: FastAPI application factory and exception handlers
- dependencies.py: Dependency providers (sessions, stores, pagination)
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Record stores and pagination logic
"""

__version__ = "0.1.0"
