"""
kvstore: an in-memory key-value store served over HTTP.

The package follows a layered layout:
- domain: store contract and error taxonomy (no framework imports)
- application: use cases for list, get and set
- infrastructure: the concurrent in-memory store
- interfaces: FastAPI routes and dependency wiring
- shared: cross-cutting middleware, error translation and logging
"""

__version__ = "0.1.0"
