from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from stock_manager.core.exceptions import EntityNullError
from stock_manager.crud.stock_item_query import StockItemQuery
from stock_manager.models.stock_item_model import StockItem


class StockItemRepository:
    """
    재고(StockItem) 테이블에 대한 CRUD/조회 경계.
    insert/update/delete는 세션에 변경을 쌓아두기만 하고, save()에서 한 번에 커밋한다.
    """
    def __init__(self, db: Session):
        self.db = db

    # READ 단일 재고 조회 (ISIN 기준, 없으면 None)
    def get_by_id(self, isin: str) -> Optional[StockItem]:
        return self.db.get(StockItem, isin)

    # READ-ALL 전체 재고 조회
    def get_all(self) -> List[StockItem]:
        return self.db.query(StockItem).all()

    # CREATE 신규 재고 추가 (save 전까지 미반영)
    def insert(self, entity: StockItem) -> None:
        self.db.add(entity)

    # UPDATE 전달된 필드만 수정
    def update(
        self,
        entity: Optional[StockItem],
        price: Optional[Decimal] = None,
        quantity: Optional[int] = None,
    ) -> StockItem:
        if entity is None:
            raise EntityNullError("Entity cannot be null.")

        if price is not None:
            entity.price = price

        if quantity is not None:
            entity.quantity = quantity

        return entity

    # DELETE 재고 삭제 (save 전까지 미반영)
    def delete(self, entity: StockItem) -> None:
        self.db.delete(entity)

    # 변경사항 일괄 커밋
    def save(self) -> None:
        try:
            self.db.commit()
        except Exception:
            # 오류 발생 시 롤백 후 그대로 전달
            self.db.rollback()
            raise

    # 조건 기반 지연 조회
    def find(self, *criteria) -> StockItemQuery:
        return StockItemQuery(self.db, criteria)
