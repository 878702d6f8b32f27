"""
Application package initializer.

The service is split into a handful of small pieces: ``schemas`` holds
the book model and its document mapping, ``services`` wraps the MongoDB
collection, ``api`` exposes the HTTP routes and ``core`` carries
configuration, logging, the database client and error handlers.
"""

from .main import app  # noqa: F401
