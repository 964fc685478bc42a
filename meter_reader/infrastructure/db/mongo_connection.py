# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

# Local application imports
from ...core.config import Settings


MEASURES_COLLECTION = "measures"
COUNTERS_COLLECTION = "counters"


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Create the MongoDB client for this process.

    Datetimes are returned timezone-aware (UTC).
    """
    return AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """
    Get the configured database from a client

    Returns:
        MongoDB database instance
    """
    return client[settings.mongo_database_name]


def get_measure_collection(database: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    """
    Get measures collection from MongoDB

    Returns:
        MongoDB collection for measures
    """
    return database[MEASURES_COLLECTION]


def get_counter_collection(database: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    """
    Get the sequence counters collection (source of Measure.id values)

    Returns:
        MongoDB collection for counters
    """
    return database[COUNTERS_COLLECTION]
