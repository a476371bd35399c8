"""Weight per foot tables for wrought steel pipe and nominal size lookup.

Tables are loaded once from `weight_tables.yaml` and kept as tuples of
(nominal size, weight per foot) pairs sorted by nominal size.
"""
from . import logger, FabWeightError
from . import os, __location__
from .units import ureg
from .schedule import ScheduleClass
from serialize import load
from types import MappingProxyType


def _load_tables(table_name):
    yaml_tables = load(os.path.join(__location__, table_name))
    result = {}
    for schedule, sub_table in yaml_tables.items():
        result[ScheduleClass(schedule)] = tuple(
            (float(D), w*ureg.plf) for D, w in sorted(sub_table.items()))
    return MappingProxyType(result)


WEIGHT_TABLES = _load_tables('weight_tables.yaml')


def table_for(schedule):
    """Weight per foot table for schedule class.

    Parameters
    ----------
    schedule : ScheduleClass

    Returns
    -------
    tuple of (float, ureg.Quantity {mass: 1, length: -1})
    """
    return WEIGHT_TABLES[schedule]


def closest_nominal_size(table, target):
    """Find tabulated nominal size closest to target size.

    When the target is exactly between two sizes the smaller one wins.

    Parameters
    ----------
    table : tuple of (float, ureg.Quantity)
        Weight table sorted by nominal size.
    target : float
        Size in inches.

    Returns
    -------
    float
        Nominal size in inches.
    """
    closest = None
    min_diff = None
    for D, _ in table:
        diff = abs(D - target)
        if min_diff is None or diff < min_diff:
            closest, min_diff = D, diff
    if closest is None:
        raise FabWeightError('Weight table is empty.')
    if closest != target:
        logger.debug(f'Size {target}" resolved to nominal size {closest}"')
    return closest


def weight_per_foot(table, D_nom):
    """ureg.Quantity {mass: 1, length: -1} : Tabulated weight per foot for
    nominal size.
    """
    for D, w in table:
        if D == D_nom:
            return w
    raise FabWeightError(f'Nominal size {D_nom}" is not in the weight table.')
