"""
Contract Validation Module

Валидация JSON-описаний мер (measure_definition.json).
"""

from .validators import (
    ContractValidator,
    MeasureDefinitionValidator,
    SchemaLoader,
    validate_measure_definition,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MeasureDefinitionValidator",
    # Functions
    "validate_measure_definition",
]
