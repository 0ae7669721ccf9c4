"""
Domain layer package.

Contains the store contract and the error taxonomy.
This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
