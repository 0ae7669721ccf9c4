"""
Application layer for the key-value bounded context.

Use cases for listing, reading and writing entries.
No framework or infrastructure imports allowed.
"""
