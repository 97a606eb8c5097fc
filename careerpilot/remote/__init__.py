from .base import RemoteError, RemoteFunctions
from .client import FunctionsClient

from careerpilot.log import get_logger

log = get_logger(__name__)

__all__ = ["RemoteError", "RemoteFunctions", "FunctionsClient", "get_client"]


def get_client(settings: dict) -> FunctionsClient:
    cfg = settings.get("functions", {})
    url = cfg.get("url", "")
    if url:
        log.info("Remote functions endpoint: %s", url)
    else:
        log.info("No functions endpoint configured — every call will use fallbacks")
    return FunctionsClient(url, cfg.get("anon_key", ""), timeout=float(cfg.get("timeout", 20.0)))
