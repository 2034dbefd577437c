"""Processor, cache and memory information about the host."""

from __future__ import annotations

import mmap
import os
from pathlib import Path
from typing import Optional

import psutil

_SYSFS_CACHE_DIR = Path("/sys/devices/system/cpu/cpu0/cache")
_SIZE_UNITS = {"": 1, "K": 1024, "M": 1024**2, "G": 1024**3}


def physical_cores() -> int:
    """Return the number of physical cores, or -1 if it cannot be determined."""
    count = psutil.cpu_count(logical=False)
    return -1 if count is None else count


def logical_cores() -> int:
    """Return the number of logical cores, or -1 if it cannot be determined."""
    count = psutil.cpu_count(logical=True)
    return -1 if count is None else count


def _sysconf(name: str) -> Optional[int]:
    if name not in getattr(os, "sysconf_names", {}):
        return None
    try:
        value = os.sysconf(name)
    except (OSError, ValueError):
        return None
    return value if value > 0 else None


def _parse_size(text: str) -> int:
    text = text.strip().upper()
    if text and text[-1] in "KMG":
        digits, unit = text[:-1], text[-1]
    else:
        digits, unit = text, ""
    return int(digits) * _SIZE_UNITS[unit]


def _read(path: Path) -> str:
    return path.read_text(encoding="ascii").strip()


def _sysfs_cache_size(level: int, kinds: frozenset[str]) -> Optional[int]:
    try:
        entries = sorted(_SYSFS_CACHE_DIR.glob("index*"))
    except OSError:
        return None
    for entry in entries:
        try:
            if int(_read(entry / "level")) != level:
                continue
            if _read(entry / "type") not in kinds:
                continue
            size = _parse_size(_read(entry / "size"))
        except (OSError, ValueError, KeyError):
            continue
        if size > 0:
            return size
    return None


def _cache_size(sysconf_name: str, level: int, kinds: frozenset[str]) -> int:
    size = _sysconf(sysconf_name)
    if size is None:
        size = _sysfs_cache_size(level, kinds)
    return -1 if size is None else size


def l1d_cachesize() -> int:
    """Return the level-1 data cache size in bytes, or -1 if unknown."""
    return _cache_size("SC_LEVEL1_DCACHE_SIZE", 1, frozenset({"Data"}))


def l1i_cachesize() -> int:
    """Return the level-1 instruction cache size in bytes, or -1 if unknown."""
    return _cache_size("SC_LEVEL1_ICACHE_SIZE", 1, frozenset({"Instruction"}))


def l2_cachesize() -> int:
    """Return the level-2 cache size in bytes, or -1 if unknown."""
    return _cache_size("SC_LEVEL2_CACHE_SIZE", 2, frozenset({"Unified", "Data"}))


def l3_cachesize() -> int:
    """Return the level-3 cache size in bytes, or -1 if unknown."""
    return _cache_size("SC_LEVEL3_CACHE_SIZE", 3, frozenset({"Unified", "Data"}))


def memsize() -> int:
    """Return the amount of physical memory in bytes."""
    return psutil.virtual_memory().total


def pagesize() -> int:
    """Return the memory page size in bytes."""
    return mmap.PAGESIZE


def is_battery_status_present() -> bool:
    """Return True if the host reports a battery."""
    sensors_battery = getattr(psutil, "sensors_battery", None)
    if sensors_battery is None:
        return False
    try:
        return sensors_battery() is not None
    except (OSError, RuntimeError):
        return False