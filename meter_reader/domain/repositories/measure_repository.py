from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.measure import Measure, MeasureType


class MeasureRepository(ABC):
    """Repository interface - defines contract for measure data access"""

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the indexes that back the uniqueness rules"""
        pass

    @abstractmethod
    async def create(self, measure: Measure) -> Measure:
        """
        Persist a new measure and return it with its store-assigned id.

        Raises MeasureError(DOUBLE_REPORT) when the customer already has a
        reading of the same type in the same billing month.
        """
        pass

    @abstractmethod
    async def find_by_uuid(self, measure_uuid: str) -> Optional[Measure]:
        """Find measure by its external UUID"""
        pass

    @abstractmethod
    async def find_by_customer_and_month(
        self,
        customer_code: str,
        measure_type: MeasureType,
        billing_month: str,
    ) -> Optional[Measure]:
        """Find the measure occupying a customer's monthly bucket for a type"""
        pass

    @abstractmethod
    async def find_by_customer(
        self,
        customer_code: str,
        measure_type: Optional[MeasureType] = None,
    ) -> List[Measure]:
        """List a customer's measures, newest first, optionally filtered by type"""
        pass

    @abstractmethod
    async def update_confirmed_value(self, measure_uuid: str, confirmed_value: int) -> bool:
        """
        Set confirmed_value if it has not been set yet.

        Returns True when a measure was updated, False otherwise.
        """
        pass
