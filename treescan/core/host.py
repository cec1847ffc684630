# File: treescan/core/host.py

import logging
import os
import platform
import time
from typing import Any, Dict

import psutil

logger = logging.getLogger(__name__)


def collect_host_info() -> Dict[str, Any]:
    """
    Snapshot of the machine running the scan.
    Recorded in the report so an inventory can be traced back to its host.

    Boot time is best effort: when psutil cannot read it (restricted
    containers, unsupported platforms) boot_time and uptime are reported as 0.
    """
    try:
        boot_time = int(psutil.boot_time())
    except (psutil.Error, OSError) as e:
        logger.warning(f"Boot time unavailable, reporting 0: {e}")
        boot_time = 0

    return {
        "hostname": platform.node(),
        "os": platform.system().lower(),
        "platform": platform.platform(),
        "platform_version": platform.release(),
        "kernel_arch": platform.machine(),
        "cpu_count": os.cpu_count() or 0,
        "boot_time": boot_time,
        "uptime": max(0, int(time.time()) - boot_time) if boot_time else 0,
        "python_version": platform.python_version(),
    }
