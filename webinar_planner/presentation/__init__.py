"""Presentation layer - API endpoints and HTTP concerns.

Routers dispatch commands to the application layer and translate Result
values into HTTP responses (RFC 9457 Problem Details on failure).
"""
