"""
Color Code MCP Server - FastAPI implementation
Provides endpoints for parsing and formatting CSS3 color codes
"""

import logging
from typing import Optional

from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

from config import ServerSettings
# Routers
from routers import colorCode_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Color Code MCP Server",
    description="A FastAPI server for CSS3 color code parsing and formatting",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

# Mount routers (paths unchanged)
app.include_router(colorCode_router)


def run(settings: Optional[ServerSettings] = None):
    """Configure logging, optionally mount MCP and serve the app."""
    settings = settings or ServerSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.mcp_enabled:
        mcp = FastApiMCP(app, exclude_operations=[])
        mcp.mount_http()
        logger.info("MCP endpoint mounted")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
