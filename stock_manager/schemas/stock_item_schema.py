from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from stock_manager.models.stock_item_model import ISIN_MAX_LENGTH, PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS, QUANTITY_MAX


# 재고 입력 스키마 (생성/수정 공용)
class StockItemDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    isin: str = Field(min_length=1, max_length=ISIN_MAX_LENGTH)  # 모든 작업에 필수
    name: Optional[str] = None                                   # 생성 시 필수, 수정 시 무시
    quantity: Optional[int] = Field(default=None, ge=0, le=QUANTITY_MAX)  # 미입력 → 변경 없음
    price: Optional[Decimal] = Field(                                    # 미입력 → 변경 없음
        default=None, ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )

    def updates(self) -> dict:
        """
        수정 요청으로 실제 전달된 가격/수량만 반환한다.
        (exclude_unset=True → 전달된 값만, null은 미입력과 동일하게 취급)
        """
        data = self.model_dump(include={"price", "quantity"}, exclude_unset=True)
        return {key: value for key, value in data.items() if value is not None}


# 재고 수정 요청 본문 (ISIN은 경로로 전달)
class StockItemUpdate(BaseModel):
    quantity: Optional[int] = Field(default=None, ge=0, le=QUANTITY_MAX)
    price: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )


# 재고 응답 스키마
class StockItemResponse(BaseModel):
    isin: str
    name: str
    quantity: int
    price: Decimal

    model_config = ConfigDict(from_attributes=True)
