"""업로드 라우터 — 업로드 URL 발급, 로컬 모드 PUT 수신.

Upload Router — issues upload URLs and, in local storage mode, receives the
uploaded bytes itself.
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from greencity.services.storage_service import storage_service
from greencity.utils.exceptions import BadRequestError

router: APIRouter = APIRouter()


class UploadUrlRequest(BaseModel):
    filename: str = Field(..., min_length=1, max_length=255)
    content_type: str = Field(..., pattern=r"^image/")
    folder: str = "habits"


class UploadUrlResponse(BaseModel):
    upload_url: str
    file_url: str


class UploadResult(BaseModel):
    key: str
    size: int


@router.post("/presigned-url", response_model=UploadUrlResponse)
async def create_upload_url(data: UploadUrlRequest) -> UploadUrlResponse:
    """업로드 대상 URL을 발급합니다. ``file_url``을 습관 생성/수정 시 ``image``로 전달."""
    issued = storage_service.generate_presigned_upload_url(
        filename=data.filename,
        content_type=data.content_type,
        folder=data.folder,
    )
    return UploadUrlResponse(upload_url=issued["upload_url"], file_url=issued["file_url"])


@router.put("/upload/{key:path}", response_model=UploadResult)
async def upload_local(key: str, request: Request) -> UploadResult:
    if not storage_service.is_local:
        raise BadRequestError("Direct upload is only available in local storage mode")
    body: bytes = await request.body()
    try:
        storage_service.save_local(key, body)
    except ValueError as exc:
        raise BadRequestError(str(exc)) from exc
    return UploadResult(key=key, size=len(body))
