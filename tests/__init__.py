"""Test suite for GiftCircle.

Test structure:
- unit/: Domain rules, handlers and adapters with mocked collaborators
- api/: HTTP endpoints through the FastAPI app with dependency overrides
- integration/: Repositories against a real PostgreSQL database
"""
