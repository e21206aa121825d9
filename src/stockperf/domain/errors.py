# src/stockperf/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised when price data or
performance inputs violate business rules.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidInputError(DomainError, ValueError):
    """Raised when input cannot produce a result (e.g., no prices in range)."""
    pass


class InvalidPriceError(InvalidInputError):
    """Raised when a price value is invalid (e.g., negative)."""
    pass


class NumericError(DomainError, ArithmeticError):
    """Raised when a calculation is undefined (e.g., division by zero)."""
    pass
