"""Application layer - Use cases and orchestration.

Commands are immutable requests; each has one handler that validates business
rules against domain entities and persists through repository protocols.
Handlers return Result types and never raise for business rule violations.
"""
