from typing import TYPE_CHECKING
from ...domain.repositories.measure_repository import MeasureRepository
from ...infrastructure.db.mongo_measure_repository import MongoMeasureRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            MeasureRepository,
            MongoMeasureRepository(
                measure_collection=container.get("measure_collection"),
                counter_collection=container.get("counter_collection"),
            )
        )
