"""Routers: system endpoints and the versioned API."""
