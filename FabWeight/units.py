from pint import UnitRegistry
import os

# Configuring units package:
ureg = UnitRegistry()
Q_ = ureg.Quantity
__location__ = os.path.dirname(os.path.abspath(__file__))
ureg.load_definitions(os.path.join(__location__, 'pint definitions.txt'))


# Fixed kg to lb factor used for fabrication part mass conversion
LB_PER_KG = 2.20462
