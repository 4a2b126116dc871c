"""
Weight — единицы веса (斤 = 500 г, 公斤 = кг)
"""

from chinese_format.measure import unit_measure


Jin = unit_measure("Jin", "斤", module=__name__)
Kilogram = unit_measure("Kilogram", "公斤", module=__name__)
