"""
Diagnostics sink for the processing pipeline.

Every non-fatal skip or fallback taken while normalizing prototypes is
reported here. Messages are buffered for later inspection and forwarded to
a dedicated logger, which stays silent unless verbose output is enabled.
"""

import logging
from collections import deque
from typing import Callable, List, Optional

DIAGNOSTICS_LOGGER_NAME = "factorio_calcdata.diagnostics"


class DiagnosticsSink:
    """Collects free-form diagnostic messages.

    Keeps the last ``max_messages`` messages in a ring buffer and logs each
    one at INFO level on the diagnostics logger. An optional callback lets
    a caller observe messages as they arrive.
    """

    def __init__(
        self,
        max_messages: int = 10000,
        logger: Optional[logging.Logger] = None,
    ):
        self.max_messages = max_messages
        self.buffer: deque[str] = deque(maxlen=max_messages)
        self.logger = logger or logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
        self.callback: Optional[Callable[[str], None]] = None

    def emit(self, message: str) -> None:
        """Record a diagnostic message."""
        self.buffer.append(message)
        self.logger.info(message)
        if self.callback:
            self.callback(message)

    @property
    def messages(self) -> List[str]:
        """Get buffered messages as a list (oldest first)."""
        return list(self.buffer)

    def contains(self, fragment: str) -> bool:
        """Check whether any buffered message contains the given text."""
        return any(fragment in message for message in self.buffer)

    def clear(self) -> None:
        """Clear the message buffer."""
        self.buffer.clear()

    def set_callback(self, callback: Callable[[str], None]) -> None:
        """Set callback invoked with every new message."""
        self.callback = callback

    def __len__(self) -> int:
        return len(self.buffer)
