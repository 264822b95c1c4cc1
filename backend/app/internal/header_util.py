"""
클라이언트 UI 알림용 HTTP 응답 헤더를 만드는 유틸리티.

Utilities building HTTP response headers that drive client-side UI alerts.

헤더 이름은 `X-<앱 이름>-alert`, `X-<앱 이름>-error`, `X-<앱 이름>-params` 형식이다.
Header names follow `X-<app>-alert`, `X-<app>-error` and `X-<app>-params`.
"""

from urllib.parse import quote_plus


def create_alert(application_name: str, message: str, param: str) -> dict[str, str]:
    """
    알림 메시지와 파라미터 헤더를 만든다.
    Build the alert message and parameter headers.
    """
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": quote_plus(param),
    }


def _entity_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    param: str,
    action: str,
    sentence: str,
) -> dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.{action}"
    else:
        message = sentence
    return create_alert(application_name, message, param)


def create_entity_creation_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    param: str,
) -> dict[str, str]:
    """생성 알림 헤더 / Headers announcing a created entity."""
    return _entity_alert(
        application_name,
        enable_translation,
        entity_name,
        param,
        "created",
        f"A new {entity_name} is created with identifier {param}",
    )


def create_entity_update_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    param: str,
) -> dict[str, str]:
    """수정 알림 헤더 / Headers announcing an updated entity."""
    return _entity_alert(
        application_name,
        enable_translation,
        entity_name,
        param,
        "updated",
        f"A {entity_name} is updated with identifier {param}",
    )


def create_entity_deletion_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    param: str,
) -> dict[str, str]:
    """삭제 알림 헤더 / Headers announcing a deleted entity."""
    return _entity_alert(
        application_name,
        enable_translation,
        entity_name,
        param,
        "deleted",
        f"A {entity_name} is deleted with identifier {param}",
    )


def create_failure_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    error_key: str,
    default_message: str,
) -> dict[str, str]:
    """
    실패 알림 헤더. 번역 모드에서는 `error.<key>` 를 보낸다.
    Failure alert headers; sends `error.<key>` in translation mode.
    """
    message = f"error.{error_key}" if enable_translation else default_message
    return {
        f"X-{application_name}-error": message,
        f"X-{application_name}-params": entity_name,
    }
