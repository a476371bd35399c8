"""Parsing of fabrication product entries.

Product entry of a fishmouth (branch) fitting describes header and branch
sizes, e.g. '4x2', '6x1 1/2' or '1 1/2x3/4'. Only the branch size is needed
for the weight calculation.
"""
import math
import re
from . import logger, FabWeightError

ENTRY_PATTERN = re.compile(r'^\s*(\d[\d ./]*?)"?\s*(x)\s*([\d ./]+?)"?\s*$',
                           re.IGNORECASE)
MIXED_FRACTION = re.compile(r'^(\d+)\s+(\d+)/(\d+)$')
SIMPLE_FRACTION = re.compile(r'^(\d+)/(\d+)$')


class EntryError(FabWeightError):
    pass


def to_decimal(text):
    """Convert size text to a number.

    Parameters
    ----------
    text : str
        Mixed fraction ('1 3/4'), simple fraction ('3/4') or decimal
        ('1.5', '2').

    Returns
    -------
    float
    """
    text = text.strip()
    try:
        value = _convert(text)
    except (ValueError, OverflowError):
        raise EntryError(f'Size "{text}" is not a number or a fraction.')
    if not math.isfinite(value):
        raise EntryError(f'Size "{text}" is not a finite number.')
    return value


def _convert(text):
    match = MIXED_FRACTION.match(text)
    if match:
        whole, num, den = (int(g) for g in match.groups())
        return whole + _divide(num, den, text)
    match = SIMPLE_FRACTION.match(text)
    if match:
        num, den = (int(g) for g in match.groups())
        return _divide(num, den, text)
    return float(text)


def _divide(num, den, text):
    if den == 0:
        raise EntryError(f'Size "{text}" has zero denominator.')
    return num / den


def parse_branch_size(entry, strict=False):
    """Extract branch size from a product entry.

    Parameters
    ----------
    entry : str or None
        Product entry of the fabrication part.
    strict : bool
        Raise `EntryError` when the branch size can't be converted. By
        default such entry is logged and treated as not a fishmouth.

    Returns
    -------
    float or None
        Branch size in inches; None if the entry doesn't describe a branch.
    """
    if entry is None:
        return None
    match = ENTRY_PATTERN.match(entry)
    if match is None:
        return None
    _, _, branch = match.groups()
    try:
        return to_decimal(branch)
    except EntryError as err:
        if strict:
            raise
        logger.warning(f'Ignoring product entry "{entry}": {err.message}')
        return None
