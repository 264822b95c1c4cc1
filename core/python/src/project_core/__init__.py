"""
project_core 패키지.

백엔드 서비스 계층이 공유하는 Result 타입과 보조 함수를 제공합니다.

The `project_core` package.

Provides the Result type and helpers shared by the backend service layer.
"""

from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]
