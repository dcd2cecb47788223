from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from app.core.container import Container
from app.services.file_storage_service import FileStorage

router = APIRouter(prefix="/uploads", tags=["Uploads"])


@router.get("/{filename}")
@inject
async def get_upload(
    filename: str,
    file_storage: FileStorage = Depends(Provide[Container.file_storage]),
):
    return FileResponse(file_storage.path_for(filename))
