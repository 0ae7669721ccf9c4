"""
Interfaces layer package.

Contains the FastAPI router and dependency wiring.
No business logic belongs here.
Routes call use cases and return responses.
"""
