"""Domain errors raised by the services and mapped to responses in main.py."""


class TravelBuddyError(Exception):
    """Base class for expected, user-facing failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateAccount(TravelBuddyError):
    pass


class NotFound(TravelBuddyError):
    pass


class BadCredential(TravelBuddyError):
    pass


class TripNotFound(NotFound):
    def __init__(self, message: str = "Trip not found"):
        super().__init__(message)


class DatabaseNotConfigured(TravelBuddyError):
    def __init__(self, message: str = "Database not configured"):
        super().__init__(message)
