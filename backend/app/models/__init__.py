"""
backend에서 사용하는 ORM 엔티티와 Pydantic IO 모델 패키지.
ORM entities and Pydantic IO models used by the backend.

엔티티, 요청/응답 스키마, 조회 조건(criteria)과 페이지 모델을 포함한다.
It contains entities, request/response schemas, criteria and page models.
"""
