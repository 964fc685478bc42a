# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.constants import CounterFields, MeasureFields
from ...domain.exceptions import ErrorKind, MeasureError
from ...domain.models.measure import Measure, MeasureType
from ...domain.repositories.measure_repository import MeasureRepository
from ...utils.datetime_utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)

MONTHLY_READING_INDEX = "one_reading_per_customer_type_month"
MEASURE_UUID_INDEX = "unique_measure_uuid"
CUSTOMER_LIST_INDEX = "customer_measures_by_datetime"


class MongoMeasureRepository(MeasureRepository):
    """MongoDB implementation of MeasureRepository"""

    def __init__(
        self,
        measure_collection: AsyncIOMotorCollection,
        counter_collection: AsyncIOMotorCollection,
    ) -> None:
        self.measure_collection = measure_collection
        self.counter_collection = counter_collection

    async def ensure_indexes(self) -> None:
        """Create uniqueness and listing indexes (idempotent)"""
        await self.measure_collection.create_index(
            [(MeasureFields.MEASURE_UUID, ASCENDING)],
            unique=True,
            name=MEASURE_UUID_INDEX,
        )
        await self.measure_collection.create_index(
            [
                (MeasureFields.CUSTOMER_CODE, ASCENDING),
                (MeasureFields.MEASURE_TYPE, ASCENDING),
                (MeasureFields.BILLING_MONTH, ASCENDING),
            ],
            unique=True,
            name=MONTHLY_READING_INDEX,
        )
        await self.measure_collection.create_index(
            [
                (MeasureFields.CUSTOMER_CODE, ASCENDING),
                (MeasureFields.MEASURE_DATETIME, DESCENDING),
            ],
            name=CUSTOMER_LIST_INDEX,
        )
        logger.info("Measure collection indexes ensured")

    async def create(self, measure: Measure) -> Measure:
        """Insert a new measure with the next sequential id"""
        if not measure:
            raise ValueError("Measure cannot be None")

        try:
            measure_id = await self._next_id()
            document = self._measure_to_dict(measure)
            document[MeasureFields.ID] = measure_id
            document[MeasureFields.CREATED_AT] = utc_now()

            await self.measure_collection.insert_one(document)
        except DuplicateKeyError as e:
            if self._is_monthly_duplicate(e):
                raise MeasureError(ErrorKind.DOUBLE_REPORT) from e
            raise RuntimeError(f"Error saving measure: {str(e)}") from e
        except Exception as e:
            raise RuntimeError(f"Error saving measure: {str(e)}") from e

        return self._document_to_measure(document)

    async def find_by_uuid(self, measure_uuid: str) -> Optional[Measure]:
        """Find measure by UUID"""
        if not measure_uuid:
            return None

        try:
            document = await self.measure_collection.find_one({MeasureFields.MEASURE_UUID: measure_uuid})
        except Exception as e:
            raise RuntimeError(f"Error finding measure by UUID: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_measure(document)

    async def find_by_customer_and_month(
        self,
        customer_code: str,
        measure_type: MeasureType,
        billing_month: str,
    ) -> Optional[Measure]:
        """Find the measure in a customer's monthly bucket"""
        try:
            document = await self.measure_collection.find_one({
                MeasureFields.CUSTOMER_CODE: customer_code,
                MeasureFields.MEASURE_TYPE: measure_type.value,
                MeasureFields.BILLING_MONTH: billing_month,
            })
        except Exception as e:
            raise RuntimeError(f"Error finding measure for month: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_measure(document)

    async def find_by_customer(
        self,
        customer_code: str,
        measure_type: Optional[MeasureType] = None,
    ) -> List[Measure]:
        """List a customer's measures, newest first"""
        if not customer_code:
            return []

        query: Dict[str, Any] = {MeasureFields.CUSTOMER_CODE: customer_code}
        if measure_type is not None:
            query[MeasureFields.MEASURE_TYPE] = measure_type.value

        try:
            cursor = self.measure_collection.find(query).sort(MeasureFields.MEASURE_DATETIME, DESCENDING)
            measures = []
            async for document in cursor:
                measures.append(self._document_to_measure(document))
            return measures
        except Exception as e:
            raise RuntimeError(f"Error listing measures for customer: {str(e)}") from e

    async def update_confirmed_value(self, measure_uuid: str, confirmed_value: int) -> bool:
        """Set confirmed_value only while it is still unset"""
        try:
            update_result = await self.measure_collection.update_one(
                {
                    MeasureFields.MEASURE_UUID: measure_uuid,
                    MeasureFields.CONFIRMED_VALUE: None,
                },
                {"$set": {MeasureFields.CONFIRMED_VALUE: confirmed_value}},
            )
        except Exception as e:
            raise RuntimeError(f"Error confirming measure: {str(e)}") from e

        return update_result.modified_count > 0

    async def _next_id(self) -> int:
        """Atomically increment and return the measures sequence"""
        counter = await self.counter_collection.find_one_and_update(
            {CounterFields.MONGO_ID: CounterFields.MEASURES_COUNTER},
            {"$inc": {CounterFields.SEQUENCE: 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter[CounterFields.SEQUENCE])

    @staticmethod
    def _is_monthly_duplicate(error: DuplicateKeyError) -> bool:
        details = error.details or {}
        key_pattern = details.get("keyPattern") or {}
        if MeasureFields.BILLING_MONTH in key_pattern:
            return True
        return MONTHLY_READING_INDEX in str(error)

    def _document_to_measure(self, document: Dict[str, Any]) -> Measure:
        """Convert MongoDB document to Measure domain model"""
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        confirmed_value = document.get(MeasureFields.CONFIRMED_VALUE)

        return Measure(
            id=document.get(MeasureFields.ID),
            measure_uuid=document.get(MeasureFields.MEASURE_UUID, ""),
            customer_code=document.get(MeasureFields.CUSTOMER_CODE, ""),
            measure_datetime=ensure_utc(document.get(MeasureFields.MEASURE_DATETIME)),
            billing_month=document.get(MeasureFields.BILLING_MONTH, ""),
            measure_type=MeasureType(document.get(MeasureFields.MEASURE_TYPE)),
            measure_value=int(document.get(MeasureFields.MEASURE_VALUE, 0)),
            image_path=document.get(MeasureFields.IMAGE_PATH, ""),
            confirmed_value=int(confirmed_value) if confirmed_value is not None else None,
            created_at=ensure_utc(document.get(MeasureFields.CREATED_AT)),
        )

    def _measure_to_dict(self, measure: Measure) -> Dict[str, Any]:
        """Convert Measure domain model to MongoDB document"""
        if not measure:
            raise ValueError("Measure cannot be None")

        return {
            MeasureFields.MEASURE_UUID: measure.measure_uuid,
            MeasureFields.CUSTOMER_CODE: measure.customer_code,
            MeasureFields.MEASURE_DATETIME: ensure_utc(measure.measure_datetime),
            MeasureFields.BILLING_MONTH: measure.billing_month,
            MeasureFields.MEASURE_TYPE: measure.measure_type.value,
            MeasureFields.MEASURE_VALUE: measure.measure_value,
            MeasureFields.CONFIRMED_VALUE: measure.confirmed_value,
            MeasureFields.IMAGE_PATH: measure.image_path,
        }
