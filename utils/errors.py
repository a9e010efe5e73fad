"""
utils/errors.py

- 서비스 계층에서 던지는 도메인 예외 모음
- middlewares/error_handler.py에서 HTTP 상태코드 + 표준 에러 JSON으로 변환
"""


class GradebookError(Exception):
    """도메인 예외 공통 부모"""
    code = "GRADEBOOK_ERROR"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(GradebookError):
    """존재하지 않는 id로 조회/수정/삭제 요청"""
    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ReferentialIntegrityError(GradebookError):
    """존재하지 않는 학생 id가 반 명단에 포함된 경우 등"""
    code = "REFERENTIAL_INTEGRITY"
    status_code = 422

    def __init__(self, message: str, missing_ids=None):
        super().__init__(message)
        self.missing_ids = sorted(missing_ids or [])


class DuplicateRecordError(GradebookError):
    """유니크 키(학생+과제, 학생+반+날짜) 중복 생성"""
    code = "DUPLICATE_RECORD"
    status_code = 409
