"""Diagnostics routes: greeting, deployment profile and runtime status."""

from __future__ import annotations

import logging
import platform
from datetime import UTC, datetime

import psutil
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app import __version__
from app.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_PROFILE = "default"


def _memory_info() -> dict:
    """Host memory and this process's resident set, in bytes."""
    vm = psutil.virtual_memory()
    return {
        "totalMemory": vm.total,
        "freeMemory": vm.available,
        "usedMemory": vm.total - vm.available,
        "processMemory": psutil.Process().memory_info().rss,
    }


@router.get("", response_class=PlainTextResponse)
def hello() -> str:
    logger.info("Hello Logger!")
    return "Hello World!"


@router.get("/profile")
def profile_info() -> dict:
    """Active/default profiles, application name and server port."""
    logger.info("Getting profile information")
    settings = get_settings()
    return {
        "activeProfiles": list(settings.active_profiles) or [DEFAULT_PROFILE],
        "defaultProfiles": [DEFAULT_PROFILE],
        "applicationName": settings.app_name,
        "serverPort": str(settings.server_port),
    }


@router.get("/status")
def status_info() -> dict:
    """Liveness status with version, timestamp, memory and interpreter/OS details."""
    logger.info("Getting application status")
    return {
        "status": "UP",
        "version": __version__,
        "timestamp": datetime.now(UTC).isoformat(),
        "memory": _memory_info(),
        "system": {
            "pythonVersion": platform.python_version(),
            "osName": platform.system(),
            "osArch": platform.machine(),
        },
    }
