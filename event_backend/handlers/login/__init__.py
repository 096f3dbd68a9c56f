from .queries import LoginApi

__all__ = ["LoginApi"]
