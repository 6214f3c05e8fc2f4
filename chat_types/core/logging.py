import logging

from chat_types.core.config import get_settings


class PrivacyFilter(logging.Filter):
    """Drop message content from structured logs.

    The codec itself only logs row indexes and error details; the blocked keys
    cover message fields that applications attach as ``extra`` when they log
    around decoding.
    """

    BLOCKED_KEYS = {"text", "metadata", "preview_data", "payload"}

    def filter(self, record: logging.LogRecord) -> bool:
        for key in self.BLOCKED_KEYS:
            if hasattr(record, key):
                setattr(record, key, "[REDACTED]")
        return True


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    if not settings.redact_message_content:
        return
    # Records from child loggers only pass through handler filters.
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, PrivacyFilter) for f in handler.filters):
            handler.addFilter(PrivacyFilter())
