"""
CORS (Cross-Origin Resource Sharing) middleware configuration.

The board UI is served from its own dev server, so the API has to allow
that origin explicitly.
"""

from typing import List
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


def setup_cors(app: FastAPI, allowed_origins: List[str] = None):
    """
    Configure CORS middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        allowed_origins: List of allowed origins. Defaults to common dev origins.
    """

    if allowed_origins is None:
        allowed_origins = [
            "http://localhost:3000",    # Next.js dev server
            "http://127.0.0.1:3000",
        ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Process-Time"],  # Expose our custom timing header
    )
