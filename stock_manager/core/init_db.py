import csv
import logging
import sys
from typing import Iterable, List

from sqlalchemy.orm import sessionmaker

from stock_manager.core.database import Base, SessionLocal, engine, session_scope
from stock_manager.crud.stock_item_crud import StockItemRepository
from stock_manager.models import StockItem  # noqa: F401 - 테이블 메타데이터 등록
from stock_manager.schemas.stock_item_schema import StockItemDTO
from stock_manager.services.stock_item_service import StockItemService

logger = logging.getLogger(__name__)


# 테이블 생성 후 초기 재고 등록, 새로 등록된 건수 반환
def init_db(items: Iterable[StockItemDTO] = (), bind=engine, factory: sessionmaker = SessionLocal) -> int:
    Base.metadata.create_all(bind=bind)
    logger.info("DB 테이블 자동 생성 완료")

    items = list(items)
    if not items:
        return 0

    # 이미 있는 ISIN은 서비스에서 경고 후 건너뜀
    with session_scope(factory) as db:
        service = StockItemService(StockItemRepository(db))
        created = sum(1 for dto in items if service.add_stock(dto) is not None)

    logger.info("초기 재고 %d건 등록", created)
    return created


# CSV (isin,name,quantity,price) → 입력 스키마 목록
def load_items_csv(path: str) -> List[StockItemDTO]:
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        items = []
        for row in reader:
            # 빈 행 스킵
            if not any((v or "").strip() for v in row.values()):
                continue
            data = {key.strip(): (value or "").strip() for key, value in row.items() if key}
            items.append(StockItemDTO(**{key: value for key, value in data.items() if value}))
    return items


if __name__ == "__main__":
    from stock_manager.core.config import settings
    from stock_manager.core.logger import setup_logging

    setup_logging(settings.LOG_LEVEL)
    init_db(load_items_csv(sys.argv[1]) if len(sys.argv) > 1 else ())
