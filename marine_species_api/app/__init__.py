"""
Application package initializer.

The API is organised into ``core`` (configuration, logging, storage and
the result contract), ``schemas`` (pydantic models), ``services``
(business rules and the call dispatcher) and ``api`` (versioned HTTP
routers).
"""

from .main import app, create_app  # noqa: F401
