from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from stock_manager.core.database import get_db
from stock_manager.crud.stock_item_crud import StockItemRepository
from stock_manager.schemas.stock_item_schema import StockItemDTO, StockItemResponse, StockItemUpdate
from stock_manager.services.stock_item_service import StockItemService

# 재고 관련 API 라우터
router = APIRouter(prefix="/stocks", tags=["Stocks"])


# 요청마다 저장소/서비스를 새로 구성
def get_stock_service(db: Session = Depends(get_db)) -> StockItemService:
    return StockItemService(StockItemRepository(db))


# 전체 재고 조회
@router.get("/", response_model=List[StockItemResponse])
def read_stocks(service: StockItemService = Depends(get_stock_service)):
    return service.list_all_stocks()


# 기준 수량 미만 재고 조회
@router.get("/below-threshold", response_model=List[StockItemResponse])
def read_stocks_below_threshold(
    threshold: int = Query(..., description="이 수량 미만인 재고만 조회"),
    service: StockItemService = Depends(get_stock_service),
):
    return service.query_below_threshold(threshold).all()


# 재고 검색 (ISIN 일치 / 이름 부분 일치)
@router.get("/search", response_model=List[StockItemResponse])
def search_stocks(
    isin: Optional[str] = None,
    name: Optional[str] = None,
    service: StockItemService = Depends(get_stock_service),
):
    return service.search(isin=isin, partial_name=name).all()


# 단일 재고 조회
@router.get("/{isin}", response_model=StockItemResponse)
def read_stock(isin: str, service: StockItemService = Depends(get_stock_service)):
    return service.get_stock(isin)


# 재고 등록 (이미 있는 ISIN이면 기존 재고 반환)
@router.post("/", response_model=StockItemResponse, status_code=201)
def create_stock(stock: StockItemDTO, service: StockItemService = Depends(get_stock_service)):
    created = service.add_stock(stock)
    return created or service.get_stock(stock.isin)


# 재고 수정
@router.put("/{isin}", response_model=StockItemResponse)
def update_stock(
    isin: str,
    update_data: StockItemUpdate,
    service: StockItemService = Depends(get_stock_service),
):
    dto = StockItemDTO(isin=isin, **update_data.model_dump(exclude_unset=True))
    return service.update_stock(dto)
