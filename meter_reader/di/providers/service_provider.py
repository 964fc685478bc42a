from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.external.gemini_ocr_client import GeminiOcrClient
from ...infrastructure.storage.image_store import LocalImageStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Registers the image store and the OCR client as singletons"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        container.register_singleton(
            LocalImageStore,
            LocalImageStore(
                storage_dir=settings.image_storage_dir,
                public_base_url=settings.public_base_url,
            )
        )

        container.register_singleton(
            GeminiOcrClient,
            GeminiOcrClient(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model,
            )
        )
