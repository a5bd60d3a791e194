from .config import DemoConfiguration

__all__ = ["DemoConfiguration"]
