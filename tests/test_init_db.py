from decimal import Decimal

from stock_manager.core.init_db import init_db, load_items_csv
from stock_manager.crud.stock_item_crud import StockItemRepository
from stock_manager.schemas.stock_item_schema import StockItemDTO


def test_init_db_seeds_items_and_skips_duplicates(engine, session_factory, db):
    items = [
        StockItemDTO(isin="SEED1", name="Seed One", quantity=5, price=Decimal("1.25")),
        StockItemDTO(isin="SEED2", name="Seed Two"),
        StockItemDTO(isin="SEED1", name="Seed Again"),
    ]

    assert init_db(items, bind=engine, factory=session_factory) == 2
    assert init_db(items[:1], bind=engine, factory=session_factory) == 0

    stocks = {s.isin: s for s in StockItemRepository(db).get_all()}
    assert set(stocks) == {"SEED1", "SEED2"}
    assert stocks["SEED1"].name == "Seed One"
    assert stocks["SEED1"].price == Decimal("1.25")


def test_init_db_without_items_only_creates_tables(engine, session_factory):
    assert init_db(bind=engine, factory=session_factory) == 0


def test_load_items_csv(tmp_path):
    path = tmp_path / "stock.csv"
    path.write_text(
        "isin,name,quantity,price\n"
        "US0378331005, Apple ,10,189.50\n"
        ",,,\n"
        "DE0007164600,SAP,,\n",
        encoding="utf-8",
    )

    items = load_items_csv(str(path))

    assert [(i.isin, i.name, i.quantity, i.price) for i in items] == [
        ("US0378331005", "Apple", 10, Decimal("189.50")),
        ("DE0007164600", "SAP", None, None),
    ]
    assert items[1].model_fields_set == {"isin", "name"}
