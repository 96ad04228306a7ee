"""
FastAPI application exposing the virtual filesystem and terminal sessions.
"""

import logging

from fastapi import FastAPI

from portfolio_shell.api.routers import router as api_router
from portfolio_shell.config.settings import settings

# Create FastAPI app
app = FastAPI(title="Portfolio OS Shell API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
