"""
Core app - Shared abstractions and utilities.

This app provides:
- The HTTP error taxonomy raised by services (exceptions)
- The persistence interface implemented by each app's store (repository)
- Request logging middleware
"""
