"""
Stitches Cart - Main FastAPI Application

Single entry point serving the cart and checkout page endpoints.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stitches.db import get_store
from stitches.logging import get_logger
from stitches.routers.cart import router as cart_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Fail fast on bad store configuration
    get_store()
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Stitches Cart",
    description="Session cart with cart-review and checkout projections",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(cart_router, prefix="/api")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "stitches-cart"}
