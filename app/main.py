import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from app.container import container
from app.convert.exception import ConvertErrorCode
from app.convert.router import router as convert_router
from app.exception import BusinessException
from app.video.exception import VideoErrorCode, VideoException
from app.web.router import router as web_router

# 로거 설정
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # Startup
    logger.info("🚀 Podcast Converter API 시작 중...")
    yield
    # Shutdown
    logger.info("🔄 Podcast Converter API 종료 중...")


# FastAPI 앱 생성 (lifespan 이벤트 핸들러 포함)
app = FastAPI(
    title="YouTube to Podcast Converter",
    version="1.0.0",
    lifespan=lifespan
)

Instrumentator().instrument(app).expose(app)

# 라우터 모듈이 컨테이너보다 먼저 import된 경우에도 주입되도록 명시적으로 연결
container.wire(modules=["app.convert.router"])


@app.exception_handler(BusinessException)
async def business_exception_handler(request: Request, exc: BusinessException):
    logger.info("business_exception", extra={"path": str(request.url), "error_code": exc.error_code})
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # JSON이 아니거나 null/객체가 아닌 본문도 500이 아닌 400(URL 누락)으로 응답
    logger.info("request_validation_error", extra={"path": str(request.url), "errors": exc.errors()})
    return await business_exception_handler(request, VideoException(VideoErrorCode.VIDEO_URL_REQUIRED))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # 의존성 생성, 응답 직렬화 등 라우터 밖에서 발생한 예외도 JSON 500으로 응답
    logger.error(f"처리되지 않은 오류: path={request.url}, error={exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or ConvertErrorCode.CONVERT_FAILED.message},
    )


# 라우터 등록
app.include_router(convert_router)
app.include_router(web_router)
