"""urlkv error types."""


class QueryStringDriverError(Exception):
    """Base class for query-string driver errors.

    Attributes:
        cause: The underlying exception, if any.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class EnvironmentUnavailable(QueryStringDriverError):
    """Raised when resolving the address needs a live environment
    that is not present.

    This is a configuration error and is never swallowed by writes.
    """


class InvalidAddress(QueryStringDriverError):
    """Raised when a configured address string cannot be parsed.

    Attributes:
        address: The offending address string.
    """

    def __init__(self, address: str, cause: BaseException | None = None) -> None:
        self.address = address
        detail = f" ({cause})" if cause is not None else ""
        super().__init__(f"Invalid URL: {address}{detail}", cause)


class StorageOperationFailed(QueryStringDriverError):
    """Raised when a write operation cannot be completed."""


class AddressTooLong(QueryStringDriverError):
    """An encoded address exceeded the configured maximum length.

    Never raised. Returned by ``AddressMutator.apply`` to report a
    rejected write, which leaves the current address untouched.

    Attributes:
        length: Length of the rejected address.
        max_length: The configured limit.
    """

    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"URL length ({length}) exceeds maximum allowed ({max_length})"
        )
