import json
import logging
import os
from collections import deque
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Deque, Dict, Optional

DEFAULT_HISTORY_SIZE = 100


class LoggingAlertSender:
    """Alert sender that writes append-only JSON records to a dedicated logger.

    The most recent ``history_size`` alerts are also kept in ``sent``; older
    entries are discarded.
    """

    def __init__(
        self,
        log_path: Optional[str] = None,
        level: str = "WARNING",
        history_size: int = DEFAULT_HISTORY_SIZE,
    ) -> None:
        if history_size < 1:
            raise ValueError(f"history_size must be at least 1, got {history_size}")
        self.sent: Deque[Dict[str, Any]] = deque(maxlen=history_size)

        self.logger = logging.getLogger("homeenergy.alerts")
        self.logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

        if log_path:
            self.log_path = Path(log_path)
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            self._attach_file_handler()
        else:
            self.log_path = None

    def _attach_file_handler(self) -> None:
        target = os.path.abspath(self.log_path)
        for handler in list(self.logger.handlers):
            if not isinstance(handler, RotatingFileHandler):
                continue
            if handler.baseFilename == target:
                return
            # The alerts logger is shared; only one alert file is active at a time
            self.logger.removeHandler(handler)
            handler.close()

        handler = RotatingFileHandler(
            filename=target,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=10,
            encoding="utf-8",
        )
        formatter = logging.Formatter(
            fmt="%(asctime)sZ | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

    def send_alert(self, message: str) -> None:
        payload: Dict[str, Any] = {
            "message": message,
            "sent_at": datetime.now(timezone.utc).isoformat(),
        }
        self.sent.append(payload)
        self.logger.warning(json.dumps(payload))
