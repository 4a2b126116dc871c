"""
Length — единицы длины (счётные: 两米, 三公里)
"""

from chinese_format.measure import unit_measure
from chinese_format.protocol import Variants


Kilometer = unit_measure("Kilometer", "公里", module=__name__)
Li = unit_measure("Li", "里", module=__name__)
Meter = unit_measure("Meter", "米", module=__name__)
Decimeter = unit_measure("Decimeter", "分米", module=__name__)
Centimeter = unit_measure("Centimeter", Variants("厘米", "釐米"), module=__name__)
Millimeter = unit_measure("Millimeter", "毫米", module=__name__)
