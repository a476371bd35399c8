"""
 `FabWeight` is a Python module for dry weight takeoff of fabrication parts
and fabricated assemblies, using [Pint](https://github.com/hgrecco/pint) for
unit handling.

Provides:
    1. Weight of fishmouth branch fittings from ASME B36.10 weight per foot
       tables (STD, SCH 10, SCH 40).
    2. Mass to weight conversion for fabrication parts.
    3. Stored weight of generic assemblies with type parameter fallback.
    4. Weight takeoff tables and xlsx export.
"""

import logging
import logging.config
import os

# Setting up logging
__location__ = os.path.dirname(os.path.abspath(__file__))
logging.config.fileConfig(os.path.join(__location__, 'logging.ini'))
logger = logging.getLogger(__name__)


class FabWeightError(Exception):
    def __init__(self, message):
        self.message = message
        super().__init__(message)


from .units import ureg, Q_, LB_PER_KG
from .elements import Category, Element, ElementType, load_elements
from .parameters import read_parameter
from .schedule import ScheduleClass, classify
from .entry import EntryError, to_decimal, parse_branch_size
from .tables import WEIGHT_TABLES, table_for, closest_nominal_size
from .tables import weight_per_foot
from .weight import WeightResult, calculate, compute_weight_pounds
from .weight import total_weight
from . import report
