# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, Query

# Local application imports
from ..application.dto.measure_dto import (
    ErrorResponse,
    MeasureConfirmRequest,
    MeasureConfirmResponse,
    MeasureListResponse,
    MeasureUploadRequest,
    MeasureUploadResponse,
)
from ..application.use_cases.measure.confirm_measure import ConfirmMeasureUseCase
from ..application.use_cases.measure.list_measures import ListMeasuresUseCase
from ..application.use_cases.measure.upload_measure import UploadMeasureUseCase
from ..di.base_container import BaseContainer
from .dependencies import get_container


router = APIRouter(tags=["measures"])


@router.post(
    "/upload",
    response_model=MeasureUploadResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_measure(
    request: MeasureUploadRequest,
    container: BaseContainer = Depends(get_container),
) -> MeasureUploadResponse:
    """
    Register a meter reading from a base64 photograph

    The reading is extracted by the OCR model. Only one reading per customer,
    measure type and month is accepted.
    """
    upload_measure_use_case = container.get(UploadMeasureUseCase)
    return await upload_measure_use_case.execute(request)


@router.patch(
    "/confirm",
    response_model=MeasureConfirmResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def confirm_measure(
    request: MeasureConfirmRequest,
    container: BaseContainer = Depends(get_container),
) -> MeasureConfirmResponse:
    """Confirm or correct the value of a reading (only once)"""
    confirm_measure_use_case = container.get(ConfirmMeasureUseCase)
    return await confirm_measure_use_case.execute(request)


@router.get(
    "/{customer_code}/list",
    response_model=MeasureListResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def list_measures(
    customer_code: str,
    measure_type: Optional[str] = Query(default=None, description="WATER or GAS, case-insensitive"),
    container: BaseContainer = Depends(get_container),
) -> MeasureListResponse:
    """List a customer's readings, newest first"""
    list_measures_use_case = container.get(ListMeasuresUseCase)
    return await list_measures_use_case.execute(
        customer_code=customer_code,
        measure_type=measure_type,
    )
