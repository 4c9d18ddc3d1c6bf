"""Custom exceptions for the application."""


class AutoEraseException(Exception):
    """Base exception for Synapse User Auto Erase."""

    def __init__(self, message: str, operation: str | None = None, account: str | None = None):
        self.message = message
        self.operation = operation
        self.account = account
        super().__init__(self.message)

    def __str__(self) -> str:
        context = " ".join(
            part
            for part in (
                f"operation={self.operation}" if self.operation else "",
                f"account={self.account}" if self.account else "",
            )
            if part
        )
        return f"{self.message} ({context})" if context else self.message


class ConfigurationError(AutoEraseException):
    """Invalid or missing configuration."""


class TransportError(AutoEraseException):
    """Network or connection failure talking to the homeserver."""


class DecodeError(AutoEraseException):
    """Malformed response body."""


class ServerError(AutoEraseException):
    """Non-success status returned by an administrative action."""

    def __init__(
        self,
        status_code: int,
        body: str,
        operation: str | None = None,
        account: str | None = None,
    ):
        self.status_code = status_code
        self.body = body
        super().__init__(f"server returned {status_code}: {body}", operation, account)
