"""Versioned HTTP API and its middleware."""
