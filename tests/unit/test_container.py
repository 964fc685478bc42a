"""
Unit tests for the dependency injection container and providers.
"""
from unittest.mock import AsyncMock, MagicMock, patch
from zoneinfo import ZoneInfo

import pytest
from meter_reader.application.use_cases.measure import (
    ConfirmMeasureUseCase,
    ListMeasuresUseCase,
    UploadMeasureUseCase,
)
from meter_reader.di.base_container import BaseContainer
from meter_reader.di.container import DIContainer
from meter_reader.domain.repositories.measure_repository import MeasureRepository
from meter_reader.infrastructure.db.mongo_measure_repository import MongoMeasureRepository
from meter_reader.infrastructure.external.gemini_ocr_client import GeminiOcrClient
from meter_reader.infrastructure.storage.image_store import LocalImageStore


class TestBaseContainer:
    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_called_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", lambda: object())
        assert container.get("thing") is not container.get("thing")

    def test_missing_raises_value_error(self):
        with pytest.raises(ValueError, match="MeasureRepository"):
            BaseContainer().get(MeasureRepository)

    @pytest.mark.asyncio
    async def test_shutdown_runs_sync_and_async_hooks(self):
        container = BaseContainer()
        sync_hook = MagicMock()
        async_hook = AsyncMock()
        container.add_shutdown_hook(sync_hook)
        container.add_shutdown_hook(async_hook)

        await container.shutdown()

        sync_hook.assert_called_once()
        async_hook.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failing_hook_does_not_stop_others(self):
        container = BaseContainer()
        later = MagicMock()
        container.add_shutdown_hook(later)
        container.add_shutdown_hook(MagicMock(side_effect=RuntimeError("boom")))

        await container.shutdown()
        later.assert_called_once()


class TestMeasureProvider:
    def test_use_cases_resolve(self, container, measure_repository, image_store, ocr_client):
        upload = container.get(UploadMeasureUseCase)
        assert upload.measure_repository is measure_repository
        assert upload.image_store is image_store
        assert upload.ocr_client is ocr_client
        assert isinstance(container.get(ConfirmMeasureUseCase), ConfirmMeasureUseCase)
        assert isinstance(container.get(ListMeasuresUseCase), ListMeasuresUseCase)

    def test_upload_timezone_comes_from_container_settings(self, container, settings):
        settings.local_timezone = "Asia/Tokyo"
        assert container.get(UploadMeasureUseCase).timezone == ZoneInfo("Asia/Tokyo")


class TestDIContainer:
    def test_wires_mongo_and_services(self, settings):
        with patch("meter_reader.di.providers.database_provider.create_mongo_client") as create_client, patch(
            "meter_reader.infrastructure.external.gemini_ocr_client.genai.Client"
        ) as genai_client:
            container = DIContainer(settings)

        create_client.assert_called_once_with(settings)
        genai_client.assert_called_once_with(api_key=settings.gemini_api_key)
        assert isinstance(container.get(MeasureRepository), MongoMeasureRepository)
        assert isinstance(container.get(LocalImageStore), LocalImageStore)
        assert container.get(GeminiOcrClient).model == settings.gemini_model

    @pytest.mark.asyncio
    async def test_shutdown_closes_mongo_client(self, settings):
        with patch("meter_reader.di.providers.database_provider.create_mongo_client") as create_client, patch(
            "meter_reader.infrastructure.external.gemini_ocr_client.genai.Client"
        ):
            container = DIContainer(settings)

        await container.shutdown()
        create_client.return_value.close.assert_called_once()
