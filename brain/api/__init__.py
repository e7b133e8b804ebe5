"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← FastAPI dependencies (db, auth gate, services)
    ├── handlers/         ← Route handlers
    └── middleware/       ← Exception handlers, request context

Usage:
======
    # Run the API
    uvicorn brain.api.main:app --reload

    # Import the app
    from brain.api.main import app, create_application
"""
