"""Constants for domain model field names"""

from .measure_fields import CounterFields, MeasureFields

__all__ = [
    "CounterFields",
    "MeasureFields",
]
