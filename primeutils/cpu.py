"""Facts about the processor that guide how the sieve is laid out."""

import os
from pathlib import Path

DEFAULT_CACHE_SIZE = 32768

_SYSFS_CACHE_DIR = Path("/sys/devices/system/cpu/cpu0/cache")
_SIZE_UNITS = {"K": 1024, "M": 1024**2, "G": 1024**3}


def _parse_size(text: str) -> int | None:
    text = text.strip().upper()
    if not text:
        return None
    multiplier = _SIZE_UNITS.get(text[-1])
    digits = text[:-1] if multiplier else text
    try:
        value = int(digits) * (multiplier or 1)
    except ValueError:
        return None
    return value if value > 0 else None


def _sysconf_cache_size() -> int | None:
    try:
        value = os.sysconf("SC_LEVEL1_DCACHE_SIZE")
    except (AttributeError, ValueError, OSError):
        return None
    return value if value and value > 0 else None


def _sysfs_cache_size() -> int | None:
    for entry in sorted(_SYSFS_CACHE_DIR.glob("index*")):
        try:
            level = (entry / "level").read_text().strip()
            kind = (entry / "type").read_text().strip()
            size = (entry / "size").read_text()
        except OSError:
            continue
        if level == "1" and kind == "Data":
            parsed = _parse_size(size)
            if parsed:
                return parsed
    return None


def get_cache_size() -> int:
    """Return the size in bytes of the L1 data cache, or 32768 if unknown."""
    return _sysconf_cache_size() or _sysfs_cache_size() or DEFAULT_CACHE_SIZE


def get_cores() -> int:
    """Return the number of logical processors, at least 1."""
    cores = os.cpu_count()
    return cores if cores and cores > 0 else 1