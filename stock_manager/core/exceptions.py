"""재고 도메인 예외 정의.

HTTP 계층에서는 예외 종류별로 상태 코드를 구분한다 (400 / 404).
"""


class StockError(Exception):
    code = "stock.error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# 입력값 검증 실패 (DB 접근 전에 발생)
class StockValidationError(StockError):
    code = "stock.invalid"


# 대상 재고 없음
class StockNotFoundError(StockError):
    code = "stock.not_found"


# 저장소에 None 엔티티가 전달됨 (서비스 계층 일관성 버그)
class EntityNullError(StockError):
    code = "stock.internal"
