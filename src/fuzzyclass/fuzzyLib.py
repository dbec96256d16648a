import logging
from abc import ABC, abstractmethod
from enum import Enum
from numbers import Real
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np

from .exceptions import ConfigurationError, EmptyInputError, InvalidArgumentError
from .utilities import as_float, as_optional_float, check_folder

"""
Fuzzy Library for evaluating the membership degree of values to linguistic terms
"""

log = logging.getLogger(__name__)

CLOSED_FUNCTION_MESSAGE = 'null support values only allowed for functions open on the corresponding side'
BOUNDARY_MESSAGE = 'the function needs to have a boundary on at least one side'
FIELD_ERROR = 'No field exists with name = '


class FuzzyClassificationType(Enum):
    """ Shapes of membership functions """
    TRAPEZOID = 'trapezoid'


class TrapezoidField(Enum):
    """ Corner points of a trapezoid, in ascending order """
    LOWER_LIMIT = 'lowerLimit'
    LOWER_SUPPORT_LIMIT = 'lowerSupportLimit'
    UPPER_SUPPORT_LIMIT = 'upperSupportLimit'
    UPPER_LIMIT = 'upperLimit'


class FuzzyClassification(ABC):
    """
    Interface shared by all membership functions that classify
    numeric values into a linguistic term
    """

    fields: Tuple[str, ...] = ()

    @abstractmethod
    def get_classification(self, value: Real) -> float:
        """
        Membership degree of a single value

        Parameters
        ----------
        value : numbers.Real
            value to classify

        Returns
        -------
        float
            membership degree in [0.0, 1.0]
        """

    @abstractmethod
    def get_field_value(self, field_name: str) -> Optional[Real]:
        """
        Value of a parameter that defines the function shape

        Parameters
        ----------
        field_name : str
            one of the names returned by `get_fields`

        Returns
        -------
        numbers.Real or None
            the parameter value, None if it is absent
        """

    @abstractmethod
    def get_linguistic_term(self) -> str:
        """
        Returns
        -------
        str
            linguistic term represented by the function
        """

    @abstractmethod
    def get_type(self) -> FuzzyClassificationType:
        """
        Returns
        -------
        FuzzyClassificationType
            shape of the membership function
        """

    def get_classifications(self, values: Mapping[Hashable, Real]) -> Dict[Hashable, float]:
        """
        Membership degree of every value in a mapping

        Parameters
        ----------
        values : Mapping[Hashable, numbers.Real]
            values to classify, indexed by an arbitrary key

        Returns
        -------
        Dict[Hashable, float]
            membership degrees under the same keys
        """

        return {key: self.get_classification(value) for key, value in values.items()}

    def get_average(self, values: Iterable[float]) -> float:
        """
        Arithmetic mean of a collection of membership degrees

        Parameters
        ----------
        values : Iterable[float]
            degrees to average

        Returns
        -------
        float
            the mean value

        Raises
        ------
        EmptyInputError
            if values is empty
        """

        values = [as_float(v, 'averaged value', InvalidArgumentError) for v in values]
        if len(values) == 0:
            raise EmptyInputError('cannot average an empty collection of values')

        return float(np.mean(values))

    def get_fields(self) -> List[str]:
        """
        Names of the parameters that define the function shape

        Returns
        -------
        List[str]
            field names in their canonical order
        """

        return list(self.fields)


class TrapezoidFunc(FuzzyClassification):

    fields = tuple(field.value for field in TrapezoidField)

    def __init__(self, label: str, lower_limit: Optional[Real], lower_support_limit: Optional[Real],
                 upper_support_limit: Optional[Real], upper_limit: Optional[Real]):
        """
        Trapezoidal membership function of a linguistic term.
        The degree rises linearly from 0 at lower_limit to 1 at lower_support_limit,
        stays at 1 up to upper_support_limit and falls linearly to 0 at upper_limit.
        Leaving out lower_limit or upper_limit opens the function on that side,
        the degree then stays at 1 beyond the support limit

        Parameters
        ----------
        label : str
            linguistic term represented by the function
        lower_limit : numbers.Real or None
            left foot of the trapezoid, None if open on the left
        lower_support_limit : numbers.Real
            left shoulder of the trapezoid
        upper_support_limit : numbers.Real
            right shoulder of the trapezoid
        upper_limit : numbers.Real or None
            right foot of the trapezoid, None if open on the right

        Raises
        ------
        ConfigurationError
            if a support limit is missing, if the function is open on
            both sides or if a corner is not a finite real number
        """

        if not isinstance(label, str):
            raise ConfigurationError('label must be a string, got %r' % (label,))

        corners = (lower_limit, lower_support_limit, upper_support_limit, upper_limit)
        floats = tuple(as_optional_float(value, field, ConfigurationError)
                       for value, field in zip(corners, self.fields))

        # support limits are needed on open and closed sides alike
        if lower_support_limit is None or upper_support_limit is None:
            raise ConfigurationError(CLOSED_FUNCTION_MESSAGE)

        self._left_open = lower_limit is None
        self._right_open = upper_limit is None

        if self._left_open and self._right_open:
            raise ConfigurationError(BOUNDARY_MESSAGE)

        self._is_closed = not self._left_open and not self._right_open

        self._label = label
        self._corners = corners
        self._ll, self._lsl, self._usl, self._ul = floats
        self._field_map = dict(zip(TrapezoidField, corners))

        present = [v for v in floats if v is not None]
        if any(a > b for a, b in zip(present[:-1], present[1:])):
            log.warning('corners of %r are not in ascending order: %s', label, corners)

        log.debug('created %r', self)

    @property
    def label(self) -> str:
        return self._label

    @property
    def lower_limit(self) -> Optional[Real]:
        return self._corners[0]

    @property
    def lower_support_limit(self) -> Real:
        return self._corners[1]

    @property
    def upper_support_limit(self) -> Real:
        return self._corners[2]

    @property
    def upper_limit(self) -> Optional[Real]:
        return self._corners[3]

    @property
    def left_open(self) -> bool:
        """ True if the function has no lower limit """
        return self._left_open

    @property
    def right_open(self) -> bool:
        """ True if the function has no upper limit """
        return self._right_open

    @property
    def is_closed(self) -> bool:
        return self._is_closed

    def get_classification(self, value: Real) -> float:
        """
        Membership degree of a single value.
        The plateau takes precedence over the rising and falling edges,
        which are both open intervals

        Parameters
        ----------
        value : numbers.Real
            value to classify

        Returns
        -------
        float
            membership degree in [0.0, 1.0]

        Raises
        ------
        InvalidArgumentError
            if value is not a real number
        """

        x = as_float(value, 'value', InvalidArgumentError)

        if self._is_one(x):
            return 1.0
        elif self._is_rising(x):
            return (x - self._ll) / (self._lsl - self._ll)
        elif self._is_falling(x):
            return 1.0 - (x - self._usl) / (self._ul - self._usl)
        else:
            return 0.0

    def _is_one(self, x: float) -> bool:
        return (self._left_open and x <= self._usl) \
            or (self._right_open and x >= self._lsl) \
            or (self._is_closed and self._lsl <= x <= self._usl)

    def _is_rising(self, x: float) -> bool:
        return not self._left_open and self._ll < x < self._lsl

    def _is_falling(self, x: float) -> bool:
        return not self._right_open and self._usl < x < self._ul

    def interp(self, input_x: Union[Real, np.ndarray]) -> Union[float, np.ndarray]:
        """
        Interpret membership of input(s) for the fuzzy function,
        vectorised version of `get_classification`

        Parameters
        ----------
        input_x : Union[numbers.Real, np.ndarray]
            value(s) at which membership is to be interpreted

        Returns
        -------
        level : Union[float, np.ndarray]
            interpreted membership level(s) of the input(s),
            same shape as input_x

        Raises
        ------
        InvalidArgumentError
            if input_x holds anything but ints or floats
        """

        # strings and bools would be silently cast to float
        x = np.asarray(input_x)
        if x.dtype.kind not in 'iuf':
            raise InvalidArgumentError('cannot interpret %r as real numbers' % (input_x,))
        x = x.astype(float)

        shape = x.shape
        x = np.atleast_1d(x)
        no = np.zeros(x.shape, dtype=bool)

        if self._left_open:
            one = x <= self._usl
        elif self._right_open:
            one = x >= self._lsl
        else:
            one = (self._lsl <= x) & (x <= self._usl)

        rising = (self._ll < x) & (x < self._lsl) if not self._left_open else no
        falling = (self._usl < x) & (x < self._ul) if not self._right_open else no

        # edges of zero width are never selected
        with np.errstate(divide='ignore', invalid='ignore'):
            rise = (x - self._ll) / (self._lsl - self._ll) if not self._left_open else x
            fall = 1.0 - (x - self._usl) / (self._ul - self._usl) if not self._right_open else x

            level = np.select([one, rising, falling], [1.0, rise, fall], default=0.0)

        if shape == ():
            return float(level[0])
        return level.reshape(shape)

    def get_array(self, universe: np.ndarray) -> np.ndarray:
        """
        Sample an array of values from membership function

        Parameters
        ----------
        universe : np.ndarray
            1d array of length n
            n=number of samples

        Returns
        -------
        array : np.ndarray
            1d array of length universe
        """

        return np.atleast_1d(self.interp(np.asarray(universe, dtype=float)))

    def view(self, universe: np.ndarray, savefile: str = None):
        """
        Used to view the shape of the membership function

        Parameters
        ----------
        universe : np.ndarray
            1d array of sample points for the x axis
        savefile : str, optional
            if provided saves an image of the figure in directory
            /images/self.label/, by default None

        Returns
        -------
        fig : matplotlib.figure.Figure
        ax : matplotlib.axes.Axes
        """

        fig, ax = plt.subplots(nrows=1, figsize=(8, 3))

        ax.plot(universe, self.get_array(universe), 'b', linewidth=1.5, label=self.label)
        ax.set_title(self.label)
        ax.set_ylim(-0.05, 1.05)
        ax.legend()

        ax.spines['top'].set_visible(False)
        ax.spines['right'].set_visible(False)
        ax.get_xaxis().tick_bottom()
        ax.get_yaxis().tick_left()

        plt.tight_layout()

        if savefile is not None:
            # Save figure to image
            check_folder('images/%s' % self.label)
            fig.savefig('images/%s/%s.pdf' % (self.label, savefile),
                        format='pdf', dpi=200, bbox_inches='tight')

        return fig, ax

    def get_field_value(self, field_name: Union[str, TrapezoidField]) -> Optional[Real]:
        """
        Value of one of the corner points

        Parameters
        ----------
        field_name : Union[str, TrapezoidField]
            one of 'lowerLimit', 'lowerSupportLimit',
            'upperSupportLimit', 'upperLimit'

        Returns
        -------
        numbers.Real or None
            the value given at construction, None if
            the function is open on that side

        Raises
        ------
        InvalidArgumentError
            if no field exists with that name
        """

        try:
            field = TrapezoidField(field_name)
        except ValueError:
            raise InvalidArgumentError(FIELD_ERROR + str(field_name)) from None

        return self._field_map[field]

    def get_linguistic_term(self) -> str:
        return self._label

    def get_type(self) -> FuzzyClassificationType:
        return FuzzyClassificationType.TRAPEZOID

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the function to a plain dictionary

        Returns
        -------
        Dict[str, Any]
            label, type and the four corner points
        """

        d = {'label': self._label, 'type': self.get_type().value}
        d.update({field.value: value for field, value in self._field_map.items()})
        return d

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> 'TrapezoidFunc':
        """
        Create a function from a dictionary such as the one returned by `to_dict`,
        missing corner points are treated as absent

        Parameters
        ----------
        d : Mapping[str, Any]
            must contain 'label', may contain 'type' and the corner points

        Returns
        -------
        TrapezoidFunc

        Raises
        ------
        ConfigurationError
            if the label is missing, the type is not 'trapezoid'
            or the corner points are invalid
        """

        if 'label' not in d:
            raise ConfigurationError('a label is required to create a membership function')

        kind = d.get('type', FuzzyClassificationType.TRAPEZOID.value)
        if kind != FuzzyClassificationType.TRAPEZOID.value:
            raise ConfigurationError('cannot create a trapezoid from type %r' % (kind,))

        return cls(d['label'], *[d.get(field) for field in cls.fields])

    def __eq__(self, other):
        if not isinstance(other, TrapezoidFunc):
            return NotImplemented
        return (self._label, self._corners) == (other._label, other._corners)

    def __hash__(self):
        return hash((self._label, self._corners))

    def __repr__(self):
        return '%s(%r, %r, %r, %r, %r)' % ((type(self).__name__, self._label) + self._corners)
