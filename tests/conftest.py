"""
Shared pytest fixtures for meter reader tests.
"""
import base64
import dataclasses
import os
from io import BytesIO
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from PIL import Image

from meter_reader.core.config import Settings
from meter_reader.di.base_container import BaseContainer
from meter_reader.di.providers import MeasureProvider
from meter_reader.domain.exceptions import ErrorKind, MeasureError
from meter_reader.domain.models.measure import Measure, MeasureType
from meter_reader.domain.repositories.measure_repository import MeasureRepository
from meter_reader.infrastructure.external.gemini_ocr_client import GeminiOcrClient, parse_meter_value
from meter_reader.infrastructure.storage.image_store import LocalImageStore


def make_image_base64(image_format: str = "PNG", size=(8, 8)) -> str:
    buffer = BytesIO()
    Image.new("RGB", size, (255, 255, 255)).save(buffer, format=image_format)
    return base64.b64encode(buffer.getvalue()).decode("ascii")


class InMemoryMeasureRepository(MeasureRepository):
    """MeasureRepository kept in a dict, with the same uniqueness rules as MongoDB."""

    def __init__(self) -> None:
        self.measures: Dict[str, Measure] = {}
        self._last_id = 0

    async def ensure_indexes(self) -> None:
        pass

    async def create(self, measure: Measure) -> Measure:
        for existing in self.measures.values():
            if (
                existing.customer_code == measure.customer_code
                and existing.measure_type == measure.measure_type
                and existing.billing_month == measure.billing_month
            ):
                raise MeasureError(ErrorKind.DOUBLE_REPORT)
        self._last_id += 1
        saved = dataclasses.replace(measure, id=self._last_id)
        self.measures[saved.measure_uuid] = saved
        return saved

    async def find_by_uuid(self, measure_uuid: str) -> Optional[Measure]:
        return self.measures.get(measure_uuid)

    async def find_by_customer_and_month(
        self, customer_code: str, measure_type: MeasureType, billing_month: str
    ) -> Optional[Measure]:
        for measure in self.measures.values():
            if (
                measure.customer_code == customer_code
                and measure.measure_type == measure_type
                and measure.billing_month == billing_month
            ):
                return measure
        return None

    async def find_by_customer(
        self, customer_code: str, measure_type: Optional[MeasureType] = None
    ) -> List[Measure]:
        found = [
            m for m in self.measures.values()
            if m.customer_code == customer_code and (measure_type is None or m.measure_type == measure_type)
        ]
        return sorted(found, key=lambda m: m.measure_datetime, reverse=True)

    async def update_confirmed_value(self, measure_uuid: str, confirmed_value: int) -> bool:
        measure = self.measures.get(measure_uuid)
        if measure is None or measure.confirmed_value is not None:
            return False
        self.measures[measure_uuid] = dataclasses.replace(measure, confirmed_value=confirmed_value)
        return True


class StubOcrClient:
    """Stands in for GeminiOcrClient; answers with a fixed model response."""

    def __init__(self, response_text: str = "12345") -> None:
        self.response_text = response_text
        self.calls = 0

    async def extract_meter_value(self, image_base64: str) -> int:
        self.calls += 1
        try:
            return parse_meter_value(self.response_text)
        except ValueError as e:
            raise MeasureError(ErrorKind.SERVER_ERROR, "Failed to process image") from e


@pytest.fixture
def mock_env(tmp_path):
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_meter_db",
        "GEMINI_API_KEY": "test_gemini_key_placeholder",
        "GEMINI_MODEL": "gemini-test",
        "IMAGE_STORAGE_DIR": str(tmp_path / "images"),
        "PUBLIC_BASE_URL": "",
        "LOCAL_TIMEZONE": "UTC",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(mock_env) -> Settings:
    return Settings()


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for modules that read the timezone."""
    mock = MagicMock()
    mock.local_timezone = "UTC"

    with patch("meter_reader.core.config.get_settings", return_value=mock), patch(
        "meter_reader.utils.datetime_utils.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def image_base64() -> str:
    return make_image_base64()


@pytest.fixture
def measure_repository() -> InMemoryMeasureRepository:
    return InMemoryMeasureRepository()


@pytest.fixture
def ocr_client() -> StubOcrClient:
    return StubOcrClient("12345")


@pytest.fixture
def image_store(tmp_path) -> LocalImageStore:
    return LocalImageStore(storage_dir=tmp_path / "images")


@pytest.fixture
def container(settings, measure_repository, image_store, ocr_client) -> BaseContainer:
    """Container wired like DIContainer but with in-memory/stub collaborators."""
    container = BaseContainer()
    container.register_singleton(Settings, settings)
    container.register_singleton(MeasureRepository, measure_repository)
    container.register_singleton(LocalImageStore, image_store)
    container.register_singleton(GeminiOcrClient, ocr_client)
    MeasureProvider.register(container)
    return container
