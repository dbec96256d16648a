""" Useful utility functions """

import math
import os
from numbers import Real
from typing import Optional, Type


def check_folder(folder: str = 'images/'):
    """
    check if folder exists, make if not present

    Parameters
    ----------
    folder : str, optional
        name of directory to check, by default 'images/'
    """
    if not os.path.exists(folder):
        os.makedirs(folder)


def as_float(value: Real, name: str, error: Type[Exception]) -> float:
    """
    Widen a real number to float

    Parameters
    ----------
    value : numbers.Real
        value to widen, int, float or numpy scalar
    name : str
        name of the quantity, used in the error message
    error : Type[Exception]
        exception class raised when value is not a real number

    Returns
    -------
    float
        the widened value

    Raises
    ------
    error
        if value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise error('%s must be a real number, got %r' % (name, value))
    return float(value)


def as_optional_float(value: Optional[Real], name: str, error: Type[Exception]) -> Optional[float]:
    """ same as `as_float` but lets None through and rejects inf and NaN """
    if value is None:
        return None
    value = as_float(value, name, error)
    if not math.isfinite(value):
        raise error('%s must be a finite number, got %r' % (name, value))
    return value
