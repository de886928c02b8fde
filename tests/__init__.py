"""
Payment Service Test Suite

This package contains all tests for the payment service including:
- Unit tests for the DTO mapping and error rendering
- Repository tests against an in-memory database
- Order client tests against a mocked transport
- Service tests with mocked collaborators
- End-to-end tests through the HTTP API
"""
