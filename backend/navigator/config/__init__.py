from .config import Settings, settings
from .logging import setup_logging
