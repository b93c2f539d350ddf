"""Presentation layer (FastAPI routers, middleware, error responses)."""
