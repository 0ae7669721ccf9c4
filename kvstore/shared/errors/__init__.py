"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure,
whichever stage raised it, is translated once and consistently.
"""
