from .measure import (
    ConfirmMeasureUseCase,
    ListMeasuresUseCase,
    UploadMeasureUseCase,
)

__all__ = [
    "ConfirmMeasureUseCase",
    "ListMeasuresUseCase",
    "UploadMeasureUseCase",
]
