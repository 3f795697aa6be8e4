import logging
from typing import List, Optional

from sqlalchemy import func

from stock_manager.core.exceptions import StockNotFoundError, StockValidationError
from stock_manager.crud.stock_item_crud import StockItemRepository
from stock_manager.crud.stock_item_query import StockItemQuery
from stock_manager.models.stock_item_model import StockItem
from stock_manager.schemas.stock_item_schema import StockItemDTO

logger = logging.getLogger(__name__)


class StockItemService:
    """
    재고(StockItem) 관련 비즈니스 로직을 관리하는 서비스 클래스
    DB에는 직접 접근하지 않고 항상 저장소(repository)를 거친다.
    """
    def __init__(self, repository: StockItemRepository, log: Optional[logging.Logger] = None):
        self.repository = repository
        self.log = log or logger

    # CREATE 재고 등록 (중복 ISIN이면 경고만 남기고 종료)
    def add_stock(self, dto: StockItemDTO) -> Optional[StockItem]:
        if dto.name is None or not dto.name.strip():
            raise StockValidationError("Stock name must not be empty")

        if self.repository.get_by_id(dto.isin) is not None:
            self.log.warning("Stock with ISIN %s already exists", dto.isin)
            return None

        stock = StockItem(
            isin=dto.isin,
            name=dto.name,
            quantity=dto.quantity if dto.quantity is not None else 0,
            price=dto.price if dto.price is not None else 0,
        )
        self.repository.insert(stock)
        self.repository.save()

        self.log.info("Stock %s (%s) added", stock.isin, stock.name)
        return stock

    # UPDATE 재고 수정 (가격/수량 중 전달된 값만)
    def update_stock(self, dto: StockItemDTO) -> StockItem:
        stock = self.repository.get_by_id(dto.isin)
        if stock is None:
            raise StockNotFoundError("Stock not found for update")

        changes = dto.updates()
        self.repository.update(stock, price=changes.get("price"), quantity=changes.get("quantity"))
        self.repository.save()

        self.log.info("Stock %s updated: %s", stock.isin, changes)
        return stock

    # READ 단일 재고 조회
    def get_stock(self, isin: str) -> StockItem:
        stock = self.repository.get_by_id(isin)
        if stock is None:
            raise StockNotFoundError("Stock not found")
        return stock

    # READ 전체 재고 조회
    def list_all_stocks(self) -> List[StockItem]:
        return self.repository.get_all()

    # 기준 수량 미만 재고 조회 (지연 실행)
    def query_below_threshold(self, threshold: int) -> StockItemQuery:
        return self.repository.find(StockItem.quantity < threshold)

    # ISIN 일치 / 이름 부분 일치 검색 (조건이 없으면 빈 결과)
    def search(self, isin: Optional[str] = None, partial_name: Optional[str] = None) -> StockItemQuery:
        query = self.repository.find().read_only()

        if isin is None and partial_name is None:
            return query.empty()

        if isin is not None:
            query = query.where(StockItem.isin == isin)

        if partial_name is not None:
            query = query.where(
                func.lower(StockItem.name).contains(partial_name.lower(), autoescape=True)
            )

        return query
