# stock_manager/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from stock_manager.core.config import settings
from stock_manager.core.database import engine
from stock_manager.core.exceptions import StockError, StockNotFoundError, StockValidationError
from stock_manager.core.init_db import init_db
from stock_manager.core.logger import setup_logging
from stock_manager.routers.stock_item_router import router as stock_item_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("stock_manager")

app = FastAPI(title="Stock Manager", debug=settings.DEBUG)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------
# 라우터 등록
# --------------------------------
app.include_router(stock_item_router)


# --------------------------------
# 예외 처리 (도메인 예외 → HTTP 상태 코드)
# --------------------------------
ERROR_STATUS = {
    StockValidationError: 400,
    StockNotFoundError: 404,
}


@app.exception_handler(StockError)
async def stock_error_handler(request: Request, exc: StockError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), 500)
    if status_code == 500:
        logger.error("Unexpected stock error on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "code": exc.code})


@app.exception_handler(RequestValidationError)
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc) -> JSONResponse:
    payload = {"detail": "Request validation failed", "code": "validation_error", "errors": exc.errors()}
    return JSONResponse(status_code=422, content=jsonable_encoder(payload))


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


# --------------------------------
# 서버 이벤트
# --------------------------------
@app.on_event("startup")
def on_startup():
    init_db()


@app.on_event("shutdown")
def on_shutdown():
    engine.dispose()
    logger.info("DB 커넥션 풀 정리 완료")
