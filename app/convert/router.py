from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from app.api.error_handlers import handle_api_errors
from app.container import Container
from app.convert.schema import ConversionResult, ConvertRequest
from app.convert.service import ConvertService

router = APIRouter(prefix="/api")


@router.post("/convert", response_model=ConversionResult)
@inject
@handle_api_errors("팟캐스트 변환 중 오류")
async def convert_video(
    request: ConvertRequest,
    convert_service: ConvertService = Depends(Provide[Container.convert_service]),
):
    """YouTube 영상을 팟캐스트 에피소드 콘텐츠로 변환합니다."""
    return await convert_service.convert(request.youtube_url)
