from sqlalchemy import Column, String, Integer, Numeric
from stock_manager.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함

# ISIN 코드 길이 (국가코드 2 + 식별번호 9 + 검증숫자 1)
ISIN_MAX_LENGTH = 12

# 가격 정밀도 (전체 18자리, 소수점 2자리)
PRICE_MAX_DIGITS = 18
PRICE_DECIMAL_PLACES = 2

# 수량 상한 (32비트 INTEGER 컬럼)
QUANTITY_MAX = 2**31 - 1


class StockItem(Base):

    __tablename__ = "StockItems"  # DB 테이블명 지정

    # ISIN 코드, 기본키
    isin = Column("Isin", String(ISIN_MAX_LENGTH), primary_key=True)

    # 종목 이름
    name = Column("Name", String(255), nullable=False)  # 필수 입력

    # 수량
    quantity = Column("Quantity", Integer, nullable=False, default=0)

    # 가격 (소수점 2자리)
    price = Column("Price", Numeric(PRICE_MAX_DIGITS, PRICE_DECIMAL_PLACES), nullable=False, default=0)

    def __repr__(self):
        return f"<StockItem isin={self.isin!r} name={self.name!r} quantity={self.quantity} price={self.price}>"
