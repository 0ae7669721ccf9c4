"""
Key-value bounded context — domain layer.

- ports: the KeyValueStore contract every store adapter implements
- errors: the closed ErrorKind taxonomy and application-level errors
"""
