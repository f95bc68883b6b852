"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import simulator
from config import config

logging.basicConfig(level=config.log_level)

app = FastAPI(
    title="Blackjack Simulator",
    description="Basic-strategy blackjack simulation API",
    version="0.1.0",
)

# CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.allow_methods,
    allow_headers=config.cors.allow_headers,
)


@app.get("/api/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(simulator.router, prefix="/api/simulator", tags=["simulator"])
