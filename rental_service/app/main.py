# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, rental_engine
from shared.exception_handler import setup_exception_handlers
from shared.wrappers.response_wrapper import JsonResponseMiddleware
from .models.financials import invoices, receipts
from .models.leasing_tenants import contracts, tenants
from .models.space_sites import buildings, units
from .router.financials import invoices_router, receipts_router
from .router.leasing_tenants import contracts_router, tenants_router
from .router.overview import dashboard_router, reports_router
from .router.space_sites import buildings_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

# Create all tables
Base.metadata.create_all(bind=rental_engine)

app = FastAPI(title="Rental Management API")

# 1️⃣ CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 2️⃣ Custom JSON response wrapper middleware
app.add_middleware(JsonResponseMiddleware)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(buildings_router.router)
app.include_router(tenants_router.router)
app.include_router(contracts_router.router)
app.include_router(invoices_router.router)
app.include_router(receipts_router.router)
app.include_router(dashboard_router.router)
app.include_router(reports_router.router)


@app.get("/api/health")
def health():
    return {"status": "healthy"}
