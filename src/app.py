"""Flower shop FastAPI application.

Web server that processes commands synchronously via HTTP. Every request is
wrapped in the flowershop domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from flowershop.api import category_router, customer_router, flower_router, order_router
from flowershop.domain import flowershop
from flowershop.shared.http import register_validation_handler
from flowershop.utils.logging import bind_request, unbind_request

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# Routers are imported first so every command they dispatch is registered.
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - default      → in-memory database
#   - "production" → PostgreSQL
flowershop.init()


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Flower Shop API",
    description="Catalogue, customers, orders and sales reporting for a flower shop",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the Protean domain context and bind request details to the log context."""
    bind_request(method=request.method, path=request.url.path)
    try:
        with flowershop.domain_context():
            return await call_next(request)
    finally:
        unbind_request()


register_exception_handlers(app)
register_validation_handler(app)

app.include_router(category_router)
app.include_router(flower_router)
app.include_router(customer_router)
app.include_router(order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": flowershop.name})
