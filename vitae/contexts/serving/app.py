"""
Liveness Service

A single route that acknowledges the backend is up. No other routes, no request
bodies, no authentication.
"""

import os

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from loguru import logger

load_dotenv()

PORT = int(os.getenv("PORT", 3000))
LIVENESS_MESSAGE = "Backend OK"
CONTEXT_PREFIX = "[serve]"

app = FastAPI(title="VITAE liveness", docs_url=None, redoc_url=None, openapi_url=None)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", response_class=PlainTextResponse, tags=["Health"])
async def root():
    return LIVENESS_MESSAGE


def run(host: str = "0.0.0.0", port: int = PORT) -> None:
    """Start the liveness service with uvicorn (blocks until stopped)."""
    logger.info(f"{CONTEXT_PREFIX} Server listening on port {port}")
    uvicorn.run(app, host=host, port=port)
