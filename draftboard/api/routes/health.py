from typing import Dict, Any
import time
import psutil
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel


router = APIRouter()

class HealthStatus(BaseModel):
    status: str  # "healthy", "degraded", "unhealthy"
    timestamp: datetime
    version: str
    uptime_seconds: float
    checks: Dict[str, Any]


class SystemMetrics(BaseModel):
    cpu_percent: float
    memory_percent: float
    memory_available_mb: float
    disk_usage_percent: float


# Track startup time for uptime calculation
_startup_time = time.time()

@router.get("/health", response_model=HealthStatus)
async def health_check(request: Request):
    """
    Basic health check endpoint.

    Fast enough to be polled by the UI to detect a restarted server,
    which would have dropped every in-memory session.
    """

    uptime = time.time() - _startup_time

    checks = {
        "api": "healthy",  # If we're responding, API is healthy
        "active_sessions": len(request.app.state.sessions),
    }

    return HealthStatus(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=request.app.state.config["version"],
        uptime_seconds=uptime,
        checks=checks
    )


@router.get("/health/detailed", response_model=Dict[str, Any])
async def detailed_health_check(request: Request):
    """
    Detailed health check with system metrics.

    Samples CPU for a short interval, so it is slower than /health.
    """

    uptime = time.time() - _startup_time

    cpu_percent = psutil.cpu_percent(interval=0.1)
    memory = psutil.virtual_memory()
    disk = psutil.disk_usage('/')

    system_metrics = SystemMetrics(
        cpu_percent=cpu_percent,
        memory_percent=memory.percent,
        memory_available_mb=memory.available / 1024 / 1024,
        disk_usage_percent=disk.percent
    )

    sessions = request.app.state.sessions
    running_tickers = sessions.running_timers()

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": request.app.state.config["version"],
        "uptime_seconds": uptime,
        "system_metrics": system_metrics.model_dump(),
        "sessions": {
            "active": len(sessions),
            "running_timers": running_tickers,
        },
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe; the app has no external dependencies to wait on."""
    return {"status": "ready", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/health/live")
async def liveness_check():
    """
    Liveness probe endpoint.

    Returns 200 if the service is alive (even if not ready).
    """
    return {"status": "alive", "timestamp": datetime.now(timezone.utc).isoformat()}
