from .measure import Measure, MeasureType, generate_customer_code

__all__ = ["Measure", "MeasureType", "generate_customer_code"]
