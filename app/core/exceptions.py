# app/core/exceptions.py

"""
애플리케이션 공용 예외와 HTTP 오류 응답 매핑을 정의하는 모듈입니다.

클라이언트에게 노출되는 오류는 다음과 같습니다.
- 요청 파라미터 검증 실패: 422 "failed with invalid request parameters"
- Bearer 토큰 누락/형식 오류: 400, 서명 오류/만료: 401
- 그 외 모든 내부 오류(조회 실패, 중복, DB 장애, 이벤트 전송 실패): 500 "failed with internal error"

상세 원인은 로그에만 남기고 응답 본문에는 담지 않습니다.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

MSG_BAD_REQUEST = "failed with invalid request parameters"
MSG_INTERNAL_ERROR = "failed with internal error"


class AppError(Exception):
    """애플리케이션 계층에서 발생하는 모든 오류의 기반 클래스입니다."""


class StorageError(AppError):
    """저장소(DB) 작업이 실패했을 때 발생합니다. 조회 대상 없음도 여기에 포함됩니다."""


class EventSendError(AppError):
    """
    저장소 쓰기는 커밋되었지만 변경 이벤트 전송에 실패했을 때 발생합니다.
    쓰기는 롤백되지 않습니다.
    """


class ServiceError(AppError):
    """서비스 계층이 하위 계층의 오류에 문맥을 덧붙여 다시 던질 때 사용합니다."""


class AuthenticationError(Exception):
    """
    Bearer 토큰 검증 실패를 나타냅니다.
    내부 오류(AppError)와 달리 지정된 상태 코드와 메시지를 그대로 응답합니다.
    """
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ErrorResponse(BaseModel):
    """오류 응답 본문 스키마입니다."""
    message: str


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s: 요청 파라미터 검증 실패: %s", request.method, request.url.path, exc.errors())
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, MSG_BAD_REQUEST)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.error("%s %s: 내부 오류: %s", request.method, request.url.path, exc, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, MSG_INTERNAL_ERROR)


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    """검증 오류(422), 인증 오류(400/401), 내부 오류(500) 핸들러를 애플리케이션에 등록합니다."""
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(AppError, app_error_handler)
