from .mongo_connection import (
    create_mongo_client,
    get_counter_collection,
    get_database,
    get_measure_collection,
)
from .mongo_measure_repository import MongoMeasureRepository

__all__ = [
    "create_mongo_client",
    "get_counter_collection",
    "get_database",
    "get_measure_collection",
    "MongoMeasureRepository",
]
