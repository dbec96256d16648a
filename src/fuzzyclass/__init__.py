"""
Fuzzy Classification Library
----------------------------

A library for classifying numeric values into linguistic 
terms using trapezoidal fuzzy membership functions

"""

__version__ = '0.1.0'
__all__ = ['FuzzyClassification', 'FuzzyClassificationType', 'TrapezoidField', 'TrapezoidFunc',
           'FuzzyError', 'ConfigurationError', 'InvalidArgumentError', 'EmptyInputError']

from .fuzzyLib import FuzzyClassification, FuzzyClassificationType, TrapezoidField, TrapezoidFunc
from .exceptions import FuzzyError, ConfigurationError, InvalidArgumentError, EmptyInputError
