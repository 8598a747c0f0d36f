from .env import optional_env, optional_float, require_env
from .logging import configure_logging, log_boundary
from .output import ErrorPolicy, ensure_directory, write_text_atomic
from .progress import NullProgress, TqdmProgress

__all__ = [
    "configure_logging",
    "log_boundary",
    "optional_env",
    "optional_float",
    "require_env",
    "ErrorPolicy",
    "NullProgress",
    "TqdmProgress",
    "ensure_directory",
    "write_text_atomic",
]
