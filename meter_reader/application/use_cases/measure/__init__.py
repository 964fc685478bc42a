from .upload_measure import UploadMeasureUseCase
from .confirm_measure import ConfirmMeasureUseCase
from .list_measures import ListMeasuresUseCase

__all__ = ["UploadMeasureUseCase", "ConfirmMeasureUseCase", "ListMeasuresUseCase"]
