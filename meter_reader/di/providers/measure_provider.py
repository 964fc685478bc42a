from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.measure_repository import MeasureRepository
from ...application.use_cases.measure.upload_measure import UploadMeasureUseCase
from ...application.use_cases.measure.confirm_measure import ConfirmMeasureUseCase
from ...application.use_cases.measure.list_measures import ListMeasuresUseCase
from ...infrastructure.external.gemini_ocr_client import GeminiOcrClient
from ...infrastructure.storage.image_store import LocalImageStore
from ...utils.datetime_utils import resolve_timezone

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MeasureProvider:
    """Measure use case provider - registers all measure-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all measure use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            UploadMeasureUseCase,
            lambda: UploadMeasureUseCase(
                measure_repository=container.get(MeasureRepository),
                image_store=container.get(LocalImageStore),
                ocr_client=container.get(GeminiOcrClient),
                timezone=resolve_timezone(container.get(Settings).local_timezone),
            )
        )

        container.register_factory(
            ConfirmMeasureUseCase,
            lambda: ConfirmMeasureUseCase(
                measure_repository=container.get(MeasureRepository),
            )
        )

        container.register_factory(
            ListMeasuresUseCase,
            lambda: ListMeasuresUseCase(
                measure_repository=container.get(MeasureRepository),
                image_store=container.get(LocalImageStore),
            )
        )
