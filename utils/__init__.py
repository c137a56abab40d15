"""
Shared helpers: exception taxonomy, request metrics and client decorators.
"""
