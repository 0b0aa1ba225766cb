"""
Application package initializer.

The project is organised into logical pieces: ``core`` (settings,
logging, database, security, uploads, errors), ``schemas`` (pydantic
models), ``services`` (store queries and business rules) and
``api/v1/endpoints`` (one router per domain).
"""

from .main import app  # noqa: F401
