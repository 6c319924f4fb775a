from .schema import Attempt
from .history import History

__all__ = ["Attempt", "History"]
