from stock_manager.models.stock_item_model import StockItem

__all__ = ["StockItem"]
