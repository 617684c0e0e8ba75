"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, invalid_keys: list[str] | None = None):
        details = {"invalid_keys": invalid_keys} if invalid_keys else {}
        super().__init__(message, details)


class EntityNotFoundError(ApplicationError):
    """Raised when an entity with the requested id does not exist"""

    def __init__(self, entity_name: str, entity_id: int, message: str | None = None):
        details = {"entity": entity_name, "entity_id": entity_id}
        msg = message or f"{entity_name} with id {entity_id} not found"
        super().__init__(msg, details)
        self.entity_name = entity_name
        self.entity_id = entity_id


class InvalidArgumentError(ApplicationError):
    """Raised when a caller supplies invalid input (page parameters, ids, dates...)"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class PersistenceError(ApplicationError):
    """Raised when the store rejects or fails a database operation"""

    def __init__(self, operation: str, message: str, constraint_violation: bool = False):
        details = {"operation": operation, "constraint_violation": constraint_violation}
        super().__init__(message, details)
        self.operation = operation
        self.constraint_violation = constraint_violation


class MappingConfigurationError(ApplicationError):
    """Raised when a mapper names unknown fields or leaves required target fields unfilled"""

    def __init__(self, source: str, target: str, missing_fields: list[str]):
        details = {"source": source, "target": target, "missing_fields": missing_fields}
        msg = (
            f"Cannot map {source} -> {target}: unresolved "
            f"field(s) {', '.join(missing_fields)}"
        )
        super().__init__(msg, details)
