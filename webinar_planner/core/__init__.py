"""Core shared kernel.

Foundational pieces used across all architectural layers:
- Result types for railway-oriented programming
- Base domain error class and error codes
- Application settings
- Dependency injection container (composition root)
"""
