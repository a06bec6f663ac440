from .fetch_forks import fetch_forks

__all__ = ["fetch_forks"]
