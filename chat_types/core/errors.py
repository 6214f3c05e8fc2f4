class DecodeError(ValueError):
    """Raised when a map cannot be turned into a message."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class UnrecognizedType(DecodeError):
    def __init__(self, type_value: object):
        self.type_value = type_value
        if type_value is None:
            message = "Message type is missing"
        else:
            message = f"Unexpected value for message type: {type_value!r}"
        super().__init__(message, field="type")


class MissingField(DecodeError):
    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}", field=field)


class MalformedField(DecodeError):
    def __init__(self, field: str | None, reason: str):
        self.reason = reason
        label = field or "payload"
        super().__init__(f"Malformed {label}: {reason}", field=field)


class UnknownStatus(DecodeError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown message status: {value!r}", field="status")
