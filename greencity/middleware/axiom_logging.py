"""요청 로깅 미들웨어 — 로컬 액세스 로그 + Axiom 전송.

Request logging middleware.
Every request is written to the ``greencity.access`` logger; when Axiom is
configured the same structured event is also ingested into the Axiom dataset.
Event fields: method, path, query/path params, status code, duration, error
detail for 4xx/5xx responses. Personal fields (email, name) are masked.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from greencity.config import settings

logger = logging.getLogger("greencity.access")

# 마스킹 대상 필드 패턴 — Fields to mask in logged params
_MASKED_KEYS = re.compile(r"(email|token|secret|password|authorization)", re.IGNORECASE)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def _mask(data: dict[str, Any]) -> dict[str, Any]:
    return {k: "***" if _MASKED_KEYS.search(k) else v for k, v in data.items()}


async def _error_detail(response: Response) -> tuple[Response, str]:
    """에러 응답 body에서 사유를 추출하고 응답을 다시 구성합니다.

    Read the error detail out of a streamed response and rebuild the response
    from the consumed body.
    """
    body = b""
    async for chunk in response.body_iterator:
        body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

    try:
        detail = json.loads(body).get("detail", "")
        detail = detail if isinstance(detail, str) else json.dumps(detail)[:500]
    except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
        detail = body.decode("utf-8", errors="replace")[:500]

    rebuilt = Response(
        content=body,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type,
    )
    return rebuilt, detail


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청을 로깅하고 설정 시 Axiom으로 전송하는 미들웨어.

    Middleware logging every API request locally and, when configured, to Axiom.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    def _ship(self, event: dict[str, Any]) -> None:
        if self._client is None:
            return
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            # Axiom 전송 실패는 요청 처리에 영향 없음 (Ingest failures never fail the request)
            logger.warning("Axiom ingest failed for %s %s", event["method"], event["path"], exc_info=True)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        event: dict[str, Any] = {"method": request.method, "path": request.url.path, "status_code": 500}
        if request.query_params:
            event["query_params"] = _mask(dict(request.query_params))

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code
            if request.path_params:
                event["path_params"] = dict(request.path_params)
            if response.status_code >= 400:
                response, event["error"] = await _error_detail(response)
            return response
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            level = logging.WARNING if event["status_code"] >= 400 else logging.INFO
            logger.log(
                level,
                "%s %s -> %s (%.2f ms)",
                event["method"],
                event["path"],
                event["status_code"],
                event["duration_ms"],
            )
            self._ship(event)
