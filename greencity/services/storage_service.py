"""습관 이미지 저장소 — S3 또는 로컬 디스크.

Image storage for habits. Clients first ask for an upload URL, PUT the file
there, then send the returned ``file_url`` with the habit payload. Uploads
land under ``temp/``; ``finalize_upload`` moves them to their permanent key
once the habit row is written.

S3 is used when both ``AWS_ACCESS_KEY_ID`` and ``AWS_S3_BUCKET`` are set,
otherwise files are kept under ``LOCAL_UPLOADS_DIR`` and the upload URL points
back at this server.
"""

import logging
import shutil
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import boto3
from botocore.config import Config as BotoConfig

from greencity.config import settings
from greencity.utils.exceptions import BadRequestError

logger = logging.getLogger(__name__)

TEMP_PREFIX = "temp/"
ALLOWED_FOLDERS = frozenset({"habits"})


def _uploads_root() -> Path:
    if settings.LOCAL_UPLOADS_DIR:
        return Path(settings.LOCAL_UPLOADS_DIR)
    return Path(__file__).resolve().parents[2] / "uploads"


class StorageService:
    """업로드 URL 발급과 temp → 최종 위치 이동."""

    def __init__(self) -> None:
        self._s3: Any = None

    @property
    def is_local(self) -> bool:
        return not (settings.AWS_ACCESS_KEY_ID and settings.AWS_S3_BUCKET)

    @property
    def s3(self) -> Any:
        if self._s3 is None:
            self._s3 = boto3.client(
                "s3",
                region_name=settings.AWS_S3_REGION,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                config=BotoConfig(signature_version="s3v4"),
            )
        return self._s3

    @property
    def public_prefix(self) -> str:
        """저장된 파일 URL의 공통 접두사."""
        if self.is_local:
            return f"{settings.PUBLIC_BASE_URL}/uploads/"
        return f"https://{settings.AWS_S3_BUCKET}.s3.{settings.AWS_S3_REGION}.amazonaws.com/"

    def new_temp_key(self, filename: str, folder: str) -> str:
        """``temp/<folder>/YYYY/MM/DD/<uuid>.<ext>`` 형태의 키를 만듭니다."""
        if folder not in ALLOWED_FOLDERS:
            raise BadRequestError(f"Unknown upload folder: {folder}")
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
        day = datetime.now(timezone.utc).strftime("%Y/%m/%d")
        return f"{TEMP_PREFIX}{folder}/{day}/{uuid.uuid4().hex}.{ext}"

    def generate_presigned_upload_url(
        self,
        filename: str,
        content_type: str,
        folder: str = "habits",
        expires: int = 3600,
    ) -> dict[str, str]:
        """업로드 URL(PUT)과 업로드 후 파일 URL을 발급합니다.

        Issue a PUT target for the client and the URL the file will have once
        uploaded. In local mode the PUT target is this server's
        ``/api/v1/storage/upload/{key}`` endpoint.

        Returns:
            dict: ``upload_url``, ``file_url``, ``key``
        """
        key = self.new_temp_key(filename, folder)
        if self.is_local:
            upload_url = f"{settings.PUBLIC_BASE_URL}/api/v1/storage/upload/{key}"
        else:
            upload_url = self.s3.generate_presigned_url(
                "put_object",
                Params={"Bucket": settings.AWS_S3_BUCKET, "Key": key, "ContentType": content_type},
                ExpiresIn=expires,
            )
        return {"upload_url": upload_url, "file_url": self.public_prefix + key, "key": key}

    def _local_path(self, key: str) -> Path:
        root = _uploads_root().resolve()
        path = (root / key).resolve()
        if root not in path.parents:
            raise ValueError(f"Invalid storage key: {key}")
        return path

    def save_local(self, key: str, data: bytes) -> Path:
        """로컬 모드 업로드 본문 저장. 업로드 루트 밖의 키는 ValueError."""
        if not key.startswith(TEMP_PREFIX):
            raise ValueError(f"Uploads must go under {TEMP_PREFIX}: {key}")
        path = self._local_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.debug("Stored %d bytes at %s", len(data), path)
        return path

    def finalize_upload(self, file_url: str) -> str:
        """temp 업로드를 최종 키로 옮기고 최종 URL을 반환합니다.

        URLs outside this storage or not under ``temp/`` (external images,
        already finalized files) are returned unchanged.

        Raises:
            BadRequestError: temp 파일이 존재하지 않을 때 (The temp upload is missing)
        """
        prefix = self.public_prefix
        if not file_url.startswith(prefix):
            return file_url
        key = file_url[len(prefix):]
        if not key.startswith(TEMP_PREFIX):
            return file_url

        final_key = key[len(TEMP_PREFIX):]
        if self.is_local:
            self._move_local(key, final_key)
        else:
            self._move_s3(key, final_key)
        logger.info("Finalized upload %s -> %s", key, final_key)
        return prefix + final_key

    def _move_local(self, key: str, final_key: str) -> None:
        try:
            src, dst = self._local_path(key), self._local_path(final_key)
        except ValueError as exc:
            raise BadRequestError(str(exc)) from exc
        if not src.is_file():
            raise BadRequestError(f"Uploaded file not found: {key}")
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(src), str(dst))

    def _move_s3(self, key: str, final_key: str) -> None:
        bucket = settings.AWS_S3_BUCKET
        self.s3.copy_object(Bucket=bucket, Key=final_key, CopySource={"Bucket": bucket, "Key": key})
        self.s3.delete_object(Bucket=bucket, Key=key)


storage_service: StorageService = StorageService()
