from __future__ import annotations

from typing import Optional

from app.config import AppConfig, load_config, setup_logging
from app.services.container import ServiceContainer
from app.services.protocols import NotificationSender


def create_container(
    config: Optional[AppConfig] = None,
    notifier: Optional[NotificationSender] = None,
) -> ServiceContainer:
    """Load configuration, initialize logging and build the service container."""
    config = config or load_config()
    setup_logging(debug=config.DEBUG, log_file=config.log_file_path, level=config.effective_log_level)
    return ServiceContainer.build(config, notifier=notifier)
