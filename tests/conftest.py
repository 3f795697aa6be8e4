import os
from decimal import Decimal

# 앱 모듈 임포트 전에 테스트용 인메모리 DB로 전환
os.environ["DB_URL"] = "sqlite://"

import pytest
from sqlalchemy.orm import sessionmaker

from stock_manager.core.database import Base, build_engine
from stock_manager.crud.stock_item_crud import StockItemRepository
from stock_manager.schemas.stock_item_schema import StockItemDTO
from stock_manager.services.stock_item_service import StockItemService


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def repository(db):
    return StockItemRepository(db)


@pytest.fixture()
def service(repository):
    return StockItemService(repository)


@pytest.fixture()
def seeded(service):
    service.add_stock(
        StockItemDTO(isin="TEST123", name="Test Stock", quantity=100, price=Decimal("50.00"))
    )
    return service
