"""Application package for the Todo-Backend service.

This package exposes the repository, schema and model modules used by
the FastAPI application. It is intentionally lightweight; individual
modules contain the concrete implementations and documentation.
"""
