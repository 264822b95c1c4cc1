"""
backend 도메인 서비스 패키지.
Backend domain services.

SQLAlchemy 세션 위에서 동작하는 Publisher 명령/조회 서비스와
criteria → SQL 변환을 제공한다. HTTP나 FastAPI에는 직접 의존하지 않는다.
It provides the Publisher command/query services running on a SQLAlchemy
session and the criteria-to-SQL compiler, without depending on HTTP or FastAPI.
"""
