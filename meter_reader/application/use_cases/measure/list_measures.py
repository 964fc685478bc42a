# Standard library imports
from typing import Optional

# Local application imports
from ....domain.exceptions import ErrorKind, MeasureError
from ....domain.models.measure import MeasureType
from ....domain.repositories.measure_repository import MeasureRepository
from ....infrastructure.storage.image_store import LocalImageStore
from ....utils.datetime_utils import to_iso
from ....utils.validators import is_valid_measure_type
from ...dto.measure_dto import MeasureListResponse, MeasureSummary


class ListMeasuresUseCase:
    """Use case for listing a customer's measures"""

    def __init__(
        self,
        measure_repository: MeasureRepository,
        image_store: LocalImageStore,
    ) -> None:
        self.measure_repository = measure_repository
        self.image_store = image_store

    async def execute(
        self,
        customer_code: str,
        measure_type: Optional[str] = None,
    ) -> MeasureListResponse:
        """
        List measures for a customer, newest first

        Args:
            customer_code: Customer whose measures are listed
            measure_type: Optional filter, case-insensitive (empty means no filter)

        Returns:
            MeasureListResponse with one summary per measure

        Raises:
            MeasureError: INVALID_TYPE or MEASURES_NOT_FOUND
        """
        type_filter = None
        if measure_type:
            if not is_valid_measure_type(measure_type, case_sensitive=False):
                raise MeasureError(ErrorKind.INVALID_TYPE)
            type_filter = MeasureType(measure_type.upper())

        measures = await self.measure_repository.find_by_customer(customer_code, type_filter)
        if not measures:
            raise MeasureError(ErrorKind.MEASURES_NOT_FOUND)

        return MeasureListResponse(
            customer_code=customer_code,
            measures=[
                MeasureSummary(
                    measure_uuid=measure.measure_uuid,
                    measure_datetime=to_iso(measure.measure_datetime) or "",
                    measure_type=measure.measure_type.value,
                    has_confirmed=measure.is_confirmed,
                    image_url=self.image_store.url_for(measure.image_path),
                )
                for measure in measures
            ],
        )
