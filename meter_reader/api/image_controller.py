# External package imports
from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

# Local application imports
from ..application.dto.measure_dto import ErrorResponse
from ..di.base_container import BaseContainer
from ..domain.exceptions import ErrorKind, MeasureError
from ..infrastructure.storage.image_store import LocalImageStore
from .dependencies import get_container


router = APIRouter(tags=["images"])


@router.get("/images/{filename}", responses={404: {"model": ErrorResponse}})
async def get_image(
    filename: str,
    container: BaseContainer = Depends(get_container),
) -> FileResponse:
    """
    Serve a stored meter image by file name
    """
    image_store = container.get(LocalImageStore)
    resolved = image_store.resolve(filename)
    if resolved is None:
        raise MeasureError(ErrorKind.IMAGE_NOT_FOUND)
    return FileResponse(path=str(resolved))
