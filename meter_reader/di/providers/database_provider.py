from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.mongo_connection import (
    create_mongo_client,
    get_counter_collection,
    get_database,
    get_measure_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register the Mongo client, database and collections in the container.
        The client is closed by the container's shutdown hooks.
        """
        client = create_mongo_client(settings)
        database = get_database(client, settings)

        container.register_singleton("mongo_client", client)
        container.register_singleton("database", database)
        container.register_singleton("measure_collection", get_measure_collection(database))
        container.register_singleton("counter_collection", get_counter_collection(database))

        container.add_shutdown_hook(client.close)
