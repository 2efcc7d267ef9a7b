from status_checker.prober.aiohttp_prober import AiohttpProber

__all__ = ["AiohttpProber"]
