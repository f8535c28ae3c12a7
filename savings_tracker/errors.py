"""
errors.py — Domain errors raised by the services.
The HTTP layer maps each kind to a status code (see main.py).
"""


class SavingsTrackerError(Exception):
    status_code = 500

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(SavingsTrackerError):
    """A required field is missing or has an invalid value."""
    status_code = 400


class NotFoundError(SavingsTrackerError):
    """A referenced Goal or Contribution does not exist."""
    status_code = 404

    def __init__(self, resource: str, resource_id=None):
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.resource_id = resource_id


class StoreError(SavingsTrackerError):
    """The underlying database failed (connectivity, constraint, ...)."""
    status_code = 500
