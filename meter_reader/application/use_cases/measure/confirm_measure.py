# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import ErrorKind, MeasureError
from ....domain.repositories.measure_repository import MeasureRepository
from ....utils.validators import is_valid_confirmed_value, is_valid_uuid, to_confirmed_value
from ...dto.measure_dto import MeasureConfirmRequest, MeasureConfirmResponse

logger = logging.getLogger(__name__)


class ConfirmMeasureUseCase:
    """Use case for the one-time human confirmation of a reading"""

    def __init__(
        self,
        measure_repository: MeasureRepository,
    ) -> None:
        self.measure_repository = measure_repository

    async def execute(self, request: MeasureConfirmRequest) -> MeasureConfirmResponse:
        """
        Confirm (or correct) the value of a pending measure

        The provided value is stored as is; it is not compared with the OCR value.

        Raises:
            MeasureError: INVALID_DATA, MEASURE_NOT_FOUND or CONFIRMATION_DUPLICATE
        """
        if not is_valid_uuid(request.measure_uuid):
            raise MeasureError(ErrorKind.INVALID_DATA, "A valid measure_uuid is required")
        if not is_valid_confirmed_value(request.confirmed_value):
            raise MeasureError(ErrorKind.INVALID_DATA, "confirmed_value must be a valid integer")

        confirmed_value = to_confirmed_value(request.confirmed_value)

        measure = await self.measure_repository.find_by_uuid(request.measure_uuid)
        if not measure:
            raise MeasureError(ErrorKind.MEASURE_NOT_FOUND)

        if measure.is_confirmed:
            raise MeasureError(ErrorKind.CONFIRMATION_DUPLICATE)

        updated = await self.measure_repository.update_confirmed_value(measure.measure_uuid, confirmed_value)
        if not updated:
            # Another request confirmed it between the read and the update
            raise MeasureError(ErrorKind.CONFIRMATION_DUPLICATE)

        logger.info(f"Confirmed measure {measure.measure_uuid} with value {confirmed_value}")
        return MeasureConfirmResponse(success=True)
