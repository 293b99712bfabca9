from fastapi import FastAPI
import logging
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings

settings = get_settings()

app = FastAPI(title="Ride Map API",
              description="Graph layout and rendering for the ride-sharing map",
              version="1.0.0")

# Configure logging to show info-level logs from routers and the layout engine
logging.basicConfig(level=settings.log_level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, replace with specific origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    return {"message": "Welcome to Ride Map API"}


@app.get("/health")
async def health():
    """Health endpoint for local checks.

    Returns a small JSON with service status and available map endpoints.
    """
    return {
        "status": "ok",
        "service": "ridemap-backend",
        "version": "1.0.0",
        "upstream": settings.api_base,
        "routes": [
            "/api/map/layout",
            "/api/map/render",
            "/api/map/frame"
        ]
    }

# Import routers
from .routers import map as map_router
app.include_router(map_router.router, prefix="/api/map", tags=["map"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("backend.ridemap.main:app", host="0.0.0.0", port=8000, reload=True)
