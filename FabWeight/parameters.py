"""Parameter access with instance to type fallback."""
import math
from pint import DimensionalityError
from . import logger
from .units import ureg


def lookup(record, name, kind='double', unit=None):
    """Read parameter from a single record (element or element type).

    Returns None if the parameter is missing, unset or can't be read as
    `kind`.
    """
    value = record.parameters.get(name)
    if value is None:
        return None
    if kind == 'string':
        return str(value)
    if isinstance(value, ureg.Quantity):
        try:
            value = value.m_as(unit) if unit is not None else value.magnitude
        except DimensionalityError:
            logger.warning(f'{name} of {record} is {value:~}, expected {unit}.')
            return None
    try:
        value = float(value)
    except (TypeError, ValueError):
        logger.warning(f'{name} of {record} is not a number: {value!r}')
        return None
    if not math.isfinite(value):
        logger.warning(f'{name} of {record} is not finite: {value}')
        return None
    return value


def read_parameter(element, name, kind='double', unit=None):
    """Read element parameter, falling back to the element type.

    Parameters
    ----------
    element : Element
    name : str
        Parameter name, case sensitive.
    kind : str
        'double' or 'string'.
    unit : pint.Unit, optional
        Unit the number is returned in. Plain numbers are assumed to be in
        this unit already.

    Returns
    -------
    float, str or None
    """
    value = lookup(element, name, kind, unit)
    if value is None and element.type is not None:
        value = lookup(element.type, name, kind, unit)
        if value is not None:
            logger.debug(f'{name} of {element} read from {element.type}')
    return value
