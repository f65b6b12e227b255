import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Import lifespan manager and API router from their locations
from archmap.db.lifespan import lifespan
from archmap.api.v1.router import api_router
from archmap.core.config import CORS_ORIGINS

logger = logging.getLogger(__name__)

# Create FastAPI app instance using the lifespan manager
app = FastAPI(
    title="Architecture Context Mapping API",
    description="Discovers bounded contexts from the service catalog and infers DDD context relationships.",
    version="0.1.0",
    lifespan=lifespan,  # Use the imported lifespan context manager
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)
logger.info("CORS middleware added with specific origins.")


# --- Test Endpoint (Before API v1 Router) ---
@app.get("/ping", tags=["Test"])
async def ping():
    return {"message": "pong"}


# --- Include API Routers ---
app.include_router(api_router, prefix="/api/v1")
logger.info("Included API router v1 at /api/v1.")
logger.info("Architecture endpoints:")
logger.info("  GET /api/v1/architecture/health")
logger.info("  GET /api/v1/architecture/context-map")
logger.info("  GET /api/v1/architecture/contexts")
logger.info("  GET /api/v1/architecture/contexts/{context_id}")
logger.info("  GET /api/v1/architecture/contexts/{context_id}/dependencies")


# --- Root Endpoint ---
@app.get("/", tags=["Root"])
async def read_root():
    """Provides a basic welcome message."""
    return {"message": "Welcome to the Architecture Context Mapping API"}


# --- Uvicorn Entry Point ---
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("archmap.main:app", host="0.0.0.0", port=8000, reload=False)
