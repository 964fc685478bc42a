# Standard library imports
import logging
import uuid
from datetime import timezone as dt_timezone, tzinfo

# Local application imports
from ....domain.exceptions import ErrorKind, MeasureError
from ....domain.models.measure import Measure, MeasureType, generate_customer_code
from ....domain.repositories.measure_repository import MeasureRepository
from ....infrastructure.external.gemini_ocr_client import GeminiOcrClient
from ....infrastructure.storage.image_store import LocalImageStore
from ....utils.datetime_utils import billing_month, now
from ....utils.validators import validate_measure_request
from ...dto.measure_dto import MeasureUploadRequest, MeasureUploadResponse

logger = logging.getLogger(__name__)


class UploadMeasureUseCase:
    """Use case for registering a new meter reading from a photograph"""

    def __init__(
        self,
        measure_repository: MeasureRepository,
        image_store: LocalImageStore,
        ocr_client: GeminiOcrClient,
        timezone: tzinfo = dt_timezone.utc,
    ) -> None:
        self.measure_repository = measure_repository
        self.image_store = image_store
        self.ocr_client = ocr_client
        # Billing months are bucketed in this zone
        self.timezone = timezone

    async def execute(self, request: MeasureUploadRequest) -> MeasureUploadResponse:
        """
        Validate, check the monthly bucket, store the image, read it and persist.

        Args:
            request: Upload payload

        Returns:
            MeasureUploadResponse with image URL, OCR value and new measure UUID

        Raises:
            MeasureError: INVALID_DATA, DOUBLE_REPORT or SERVER_ERROR
        """
        validation = validate_measure_request(request)
        if not validation.is_valid:
            raise MeasureError(ErrorKind.INVALID_DATA, validation.error_message)

        customer_code = request.customer_code.strip() or generate_customer_code()
        measure_type = MeasureType(request.measure_type)
        measured_at = now(self.timezone)
        month = billing_month(measured_at, self.timezone)

        existing = await self.measure_repository.find_by_customer_and_month(
            customer_code, measure_type, month
        )
        if existing:
            logger.warning(
                f"Rejected second {measure_type.value} reading for customer {customer_code} in {month}"
            )
            raise MeasureError(ErrorKind.DOUBLE_REPORT)

        image_path = await self.image_store.save(request.image)
        try:
            measure_value = await self.ocr_client.extract_meter_value(request.image)

            saved = await self.measure_repository.create(
                Measure(
                    id=None,
                    measure_uuid=str(uuid.uuid4()),
                    customer_code=customer_code,
                    measure_datetime=measured_at,
                    billing_month=month,
                    measure_type=measure_type,
                    measure_value=measure_value,
                    image_path=image_path,
                )
            )
        except Exception:
            await self.image_store.delete(image_path)
            raise

        logger.info(
            f"Registered {saved.measure_type.value} measure {saved.measure_uuid} "
            f"for customer {saved.customer_code} with value {saved.measure_value}"
        )

        return MeasureUploadResponse(
            image_url=self.image_store.url_for(saved.image_path),
            measure_value=saved.measure_value,
            measure_uuid=saved.measure_uuid,
        )
