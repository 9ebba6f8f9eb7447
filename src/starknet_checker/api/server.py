import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from starknet_checker.api.routes import router
from starknet_checker.core.checker import AddressChecker
from starknet_checker.core.errors import ConfigError, GatewayError
from starknet_checker.core.models import CheckRpcUrl
from starknet_checker.core.node import SEPOLIA_RPC_URL, get_provider

logger = logging.getLogger("starknet_checker.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load configuration
    rpc_url = os.getenv("STARKNET_RPC_URL", SEPOLIA_RPC_URL)
    timeout = float(os.getenv("STARKNET_RPC_TIMEOUT", "15"))

    node = get_provider(CheckRpcUrl(rpc_url=rpc_url), timeout=timeout)
    logger.info(f"Using Starknet node at {rpc_url}")

    # Attach to app state
    app.state.node = node
    app.state.checker = AddressChecker(node)

    try:
        yield
    finally:
        node.close()


app = FastAPI(
    title="Starknet Address Checker API",
    description="Tells Starknet smart wallets from smart contracts",
    version="0.1.0",
    lifespan=lifespan,
)

# Allow CORS for easy frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(router)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    logger.error(f"Node lookup failed after {exc.attempts} attempts: {exc}")
    return JSONResponse(
        status_code=502,
        content={"detail": str(exc)},
    )


@app.exception_handler(ConfigError)
async def config_error_handler(request: Request, exc: ConfigError):
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc)},
    )


@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok"}
