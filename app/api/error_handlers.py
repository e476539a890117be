"""API 에러 처리 공통 함수들"""

import logging
from functools import wraps
from typing import Callable

from app.convert.exception import ConvertErrorCode, ConvertException
from app.exception import BusinessException

logger = logging.getLogger(__name__)


def handle_api_errors(error_message_prefix: str = "API 오류"):
    """API 엔드포인트 에러 처리 데코레이터

    BusinessException은 그대로 전파하고, 그 외 예외는 메시지를 담은 500으로 변환합니다.
    """
    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except BusinessException:
                raise
            except Exception as e:
                logger.exception(f"{error_message_prefix}: {str(e)}")
                raise ConvertException(
                    ConvertErrorCode.CONVERT_FAILED,
                    status_code=500,
                    message=str(e) or None,
                )
        return wrapper
    return decorator
