"""User registry service.

A FastAPI application exposing CRUD and birth-date search over User records,
backed by SQLModel persistence and a small validation/business-rule layer.
"""

__version__ = "0.1.0"
