from fastapi import APIRouter

from app.dependencies import SettingsDep

router = APIRouter()


@router.get(
    "",
    summary="기본 헬스 체크 / Basic health check",
)
def get_health_status(settings: SettingsDep) -> dict[str, str]:
    """
    서버 상태와 실행 환경을 반환하는 헬스 체크 엔드포인트.
    Health check endpoint reporting server status and runtime environment.
    """
    return {
        "status": "ok",
        "app_version": settings.app_version,
        "environment": settings.environment,
    }
