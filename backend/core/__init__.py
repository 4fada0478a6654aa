# Core module exports
from core.config import settings, get_settings
from core.logging import (
    configure_logging,
    get_logger,
    bind_context,
    unbind_context,
    engine_logger,
    selection_logger,
    record_logger,
)
