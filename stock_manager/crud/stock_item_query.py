from typing import Iterator, List, Optional, Tuple

from sqlalchemy import false, func, select
from sqlalchemy.orm import Session

from stock_manager.models.stock_item_model import StockItem


class StockItemQuery:
    """
    지연 실행되는 재고 조회 객체.

    필터 조건만 모아두고, all()/first()/count() 또는 순회 시점에
    SELECT 문으로 변환해 실행한다. where()는 원본을 바꾸지 않고
    조건이 추가된 새 객체를 반환하므로 자유롭게 조합할 수 있다.
    """

    def __init__(self, db: Session, criteria: Tuple = (), read_only: bool = False):
        self.db = db
        self.criteria = tuple(criteria)
        self.is_read_only = read_only

    # 조건 추가 (AND 결합)
    def where(self, *criteria) -> "StockItemQuery":
        return StockItemQuery(self.db, self.criteria + criteria, self.is_read_only)

    # 결과가 항상 비어있는 조회
    def empty(self) -> "StockItemQuery":
        return self.where(false())

    # 읽기 전용 조회 (autoflush 없이 실행, 세션에 로드된 엔티티는 덮어쓰지 않음)
    def read_only(self) -> "StockItemQuery":
        return StockItemQuery(self.db, self.criteria, read_only=True)

    # 조건을 SELECT 문으로 변환
    def statement(self):
        stmt = select(StockItem)
        if self.criteria:
            stmt = stmt.where(*self.criteria)
        return stmt

    def _execute(self, stmt):
        if self.is_read_only:
            with self.db.no_autoflush:
                return self.db.execute(stmt)
        return self.db.execute(stmt)

    # 전체 결과 조회
    def all(self) -> List[StockItem]:
        return list(self._execute(self.statement()).scalars().all())

    # 첫 번째 결과 조회
    def first(self) -> Optional[StockItem]:
        return self._execute(self.statement().limit(1)).scalars().first()

    # 결과 개수 조회
    def count(self) -> int:
        stmt = select(func.count()).select_from(self.statement().subquery())
        return self._execute(stmt).scalar_one()

    def __iter__(self) -> Iterator[StockItem]:
        return iter(self.all())

    def __repr__(self):
        return f"<StockItemQuery criteria={len(self.criteria)} read_only={self.is_read_only}>"
