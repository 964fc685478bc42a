# Local application imports
from ..core.config import Settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    MeasureProvider,
    RepositoryProvider,
    ServiceProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. External services (ServiceProvider) - image store, OCR client
    4. Use cases (MeasureProvider) - depend on repositories and services

    Built once at application startup and kept on app.state.
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services → use cases
        """
        self.register_singleton(Settings, self.settings)

        DatabaseProvider.register(self, self.settings)
        RepositoryProvider.register(self)
        ServiceProvider.register(self, self.settings)
        MeasureProvider.register(self)
