class ValidationError(Exception):
    """Client-correctable request problem, answered with HTTP 400."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class MissingField(ValidationError):
    pass


class InvalidPaymentTerms(ValidationError):
    pass


class ProcessingError(Exception):
    """Internal failure, answered with HTTP 500 and a generic apology."""


class InvalidProvider(ProcessingError):
    def __init__(self, provider):
        super().__init__(f"Unknown AI provider: {provider!r}")
        self.provider = provider
