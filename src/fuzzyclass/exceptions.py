"""Errors raised by the fuzzy classification library"""


class FuzzyError(Exception):
    """Base class for all errors raised by fuzzyclass"""


class ConfigurationError(FuzzyError, ValueError):
    """Raised when a membership function is constructed with invalid parameters"""


class InvalidArgumentError(FuzzyError, ValueError):
    """Raised when an operation receives an argument it cannot handle"""


class EmptyInputError(FuzzyError, ZeroDivisionError):
    """Raised when an average is requested over an empty collection"""
