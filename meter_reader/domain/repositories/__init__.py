from .measure_repository import MeasureRepository

__all__ = ["MeasureRepository"]
