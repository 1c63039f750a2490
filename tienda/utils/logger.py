import logging
import os

def resolve_level(name: str) -> int:
    # Unknown names (e.g. TIENDA_LOG_LEVEL=verbose) fall back to INFO.
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO

LOG_LEVEL = resolve_level(os.environ.get("TIENDA_LOG_LEVEL", "INFO"))

logger = logging.getLogger("tienda")
if not logger.handlers:
    logger.setLevel(LOG_LEVEL)
    ch = logging.StreamHandler()
    fmt = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch.setFormatter(fmt)
    logger.addHandler(ch)
