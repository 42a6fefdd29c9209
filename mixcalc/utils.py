from contextlib import contextmanager
from decimal import Decimal, ROUND_HALF_UP
import tempfile
import os

def round_half_up(x: float, digits: int = 1) -> float:
    # Decimal from repr so 202.95000000000002 rounds like 202.95 is written
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(float(x))).quantize(quantum, rounding=ROUND_HALF_UP))

def parse_number(value, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return default

def format_number(x, digits=1):
    try:
        return f"{float(x):.{digits}f}"
    except (TypeError, ValueError):
        return str(x)

@contextmanager
def atomic_write(path: str, encoding: str = "utf-8"):
    """Yield a text file handle; the target is replaced only if the block succeeds."""
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            yield f
        os.replace(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
