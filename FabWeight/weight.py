"""Dry weight of fabrication parts and fabricated assemblies.

Three ways to get the weight, picked per element:

* generic assembly: stored `CP_Weight` in lb (instance or type);
* fishmouth fabrication part: branch size from the product entry, weight per
  foot for the part schedule and the part length;
* any other fabrication part: stored `Weight` in kg converted to lb.

Missing data gives zero weight. All results are rounded to 0.001 lb.
"""
import math
from collections import namedtuple
from . import logger
from .units import ureg, LB_PER_KG
from .parameters import read_parameter
from .schedule import classify
from .entry import parse_branch_size
from .tables import table_for, closest_nominal_size, weight_per_foot

CP_WEIGHT = 'CP_Weight'
WEIGHT = 'Weight'
LENGTH = 'Length'
PRODUCT_ENTRY = 'Product Entry'
DECIMALS = 3

WeightResult = namedtuple('WeightResult', ['element_id', 'strategy', 'weight'])


def _generic_weight(element):
    weight = read_parameter(element, CP_WEIGHT, unit=ureg.lb)
    if weight is None:
        logger.debug(f'{CP_WEIGHT} not set for {element}')
        return 0*ureg.lb
    return weight*ureg.lb


def _fishmouth_weight(element, branch_size):
    schedule = classify(element.specification)
    table = table_for(schedule)
    D_nom = closest_nominal_size(table, branch_size)
    w = weight_per_foot(table, D_nom)
    L = read_parameter(element, LENGTH, unit=ureg.ft) or 0
    logger.debug(f'{element}: branch {branch_size}", NPS {D_nom}" {schedule}, '
                 f'{w:~} x {L} ft')
    return w * L*ureg.ft


def _mass_weight(element):
    mass = read_parameter(element, WEIGHT, unit=ureg.kg)
    if mass is None:
        logger.debug(f'{WEIGHT} not set for {element}')
        return 0*ureg.lb
    return mass*LB_PER_KG*ureg.lb


def calculate(element):
    """Calculate dry weight of an element.

    Parameters
    ----------
    element : Element

    Returns
    -------
    WeightResult
        Element id, strategy used ('generic', 'fishmouth' or 'mass') and
        weight in lb rounded to 3 decimals.
    """
    if not element.is_fabrication_part:
        strategy = 'generic'
        weight = _generic_weight(element)
    else:
        entry = read_parameter(element, PRODUCT_ENTRY, kind='string')
        branch_size = parse_branch_size(entry)
        if branch_size is not None:
            strategy = 'fishmouth'
            weight = _fishmouth_weight(element, branch_size)
        else:
            strategy = 'mass'
            weight = _mass_weight(element)
    result = weight.m_as(ureg.lb)
    if not math.isfinite(result):
        logger.warning(f'Weight of {element} is not finite, set to 0')
        result = 0.0
    result = round(result, DECIMALS)
    return WeightResult(element.id, strategy, result)


def compute_weight_pounds(element):
    """float : Dry weight of the element in lb rounded to 3 decimals."""
    return calculate(element).weight


def total_weight(elements):
    """float : Total dry weight of elements in lb rounded to 3 decimals."""
    return round(sum(compute_weight_pounds(el) for el in elements), DECIMALS)
