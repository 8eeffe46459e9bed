"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure
reaches the client as the same ``{"error": ...}`` envelope.
"""
