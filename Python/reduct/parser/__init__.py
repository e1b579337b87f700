from .engine import Reader
from .main import read

__all__ = ["Reader", "read"]
