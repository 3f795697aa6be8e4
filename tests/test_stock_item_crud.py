from decimal import Decimal

import pytest
from sqlalchemy.exc import SQLAlchemyError

from stock_manager.core.exceptions import EntityNullError
from stock_manager.models.stock_item_model import StockItem


def make_stock(isin="AAA111", name="Alpha", quantity=10, price="1.50"):
    return StockItem(isin=isin, name=name, quantity=quantity, price=Decimal(price))


def test_get_by_id_missing_returns_none(repository):
    assert repository.get_by_id("NOPE") is None


def test_insert_is_staged_until_save(repository, db):
    stock = make_stock()
    repository.insert(stock)

    assert stock in db.new
    assert repository.get_all() == []

    repository.save()
    assert stock not in db.new
    assert [s.name for s in repository.get_all()] == ["Alpha"]


def test_get_all_returns_list(repository):
    repository.insert(make_stock("AAA111"))
    repository.insert(make_stock("BBB222", name="Beta"))
    repository.save()

    stocks = repository.get_all()
    assert isinstance(stocks, list)
    assert {s.isin for s in stocks} == {"AAA111", "BBB222"}


def test_update_only_supplied_fields(repository):
    stock = make_stock()
    repository.insert(stock)
    repository.save()

    repository.update(stock, price=Decimal("3.25"))
    repository.save()
    assert (stock.quantity, stock.price) == (10, Decimal("3.25"))

    repository.update(stock, quantity=42)
    repository.save()
    assert (stock.quantity, stock.price) == (42, Decimal("3.25"))


def test_update_none_entity_raises(repository):
    with pytest.raises(EntityNullError):
        repository.update(None, price=Decimal("1"))


def test_delete_is_staged_until_save(repository):
    stock = make_stock()
    repository.insert(stock)
    repository.save()

    repository.delete(stock)
    repository.save()
    assert repository.get_by_id("AAA111") is None


def test_save_failure_propagates_and_rolls_back(repository, db):
    repository.insert(make_stock())
    repository.save()

    repository.insert(make_stock(name="Clone"))
    with pytest.raises(SQLAlchemyError):
        repository.save()

    # 롤백 이후 세션은 다시 사용 가능
    assert [s.name for s in repository.get_all()] == ["Alpha"]


def test_find_builds_lazy_query(repository):
    query = repository.find(StockItem.quantity > 5)
    repository.insert(make_stock(quantity=10))
    repository.save()

    assert [s.isin for s in query] == ["AAA111"]
