import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager

from app.config import settings
from app.database import create_db_and_tables
from app.exceptions import StoreError
from app.routes import (
    admin_orders,
    auth,
    health,
    orders,
    products_admin,
    products_public,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation ONLY in local
    if settings.env == "local":
        create_db_and_tables()
    logger.info(f"WhatsApp confirmations go to {settings.whatsapp_number}")
    yield

app = FastAPI(title="PeaQ Body Care Storefront API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # missing/malformed fields are a plain 400 for this API
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


app.include_router(products_public.router, prefix="/api/products", tags=["Public Products"])
app.include_router(auth.router, prefix="/api", tags=["Authentication"])
app.include_router(orders.router, prefix="/api", tags=["Orders"])
app.include_router(products_admin.router, prefix="/api/admin/products", tags=["Admin Products"])
app.include_router(admin_orders.router, prefix="/api/admin/orders", tags=["Admin Orders"])
app.include_router(health.router, prefix="/api", tags=["Health"])

os.makedirs(settings.images_dir, exist_ok=True)

app.mount("/images", StaticFiles(directory=settings.images_dir), name="images")
