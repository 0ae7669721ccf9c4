"""HTTP interface for the key-value bounded context."""
