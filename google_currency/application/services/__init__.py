from .factory import build_rate_cache
from .rate_cache import RateCache

__all__ = ['RateCache', 'build_rate_cache']
