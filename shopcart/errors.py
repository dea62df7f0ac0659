"""
Common Errors

Centralized error messages to avoid string duplication, plus the single
exception type the library raises.
"""

# Catalog errors
ERROR_INVALID_PRODUCT_LIST = "Parameter error: products must be a non-empty list of records with a 'name'"
ERROR_INVALID_PRODUCT_RECORD = "Parameter error: invalid product record at index {index}"


class ValidationError(ValueError):
    """Raised when a catalog bulk load receives malformed input."""
