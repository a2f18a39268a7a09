from .operations import OPERATIONS, OperationDescriptor, get_operation
from .schema_registry import response_schema, validate_result

__all__ = [
    "OPERATIONS",
    "OperationDescriptor",
    "get_operation",
    "response_schema",
    "validate_result",
]
