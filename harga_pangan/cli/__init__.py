from . import main as main_module
from .main import main

__all__ = ["main", "main_module"]
