"""
Domain exceptions.
"""
from uuid import UUID


class ActivityNotFoundError(Exception):
    """
    Raised when no activity matches both the id and the requesting owner.

    Absent and not-owned records are reported the same way.
    """

    def __init__(self, activity_id: UUID | str):
        self.activity_id = activity_id
        super().__init__(f"Activity {activity_id} not found")


class TextGenerationUnavailable(Exception):
    """
    Raised when the external text-generation service fails or is not configured.

    Preserves the original exception if one was caught.
    """

    def __init__(self, message: str, original_exception: Exception | None = None):
        self.original_exception = original_exception
        error_msg = message
        if original_exception:
            error_msg += (
                f"\nCaused by: {type(original_exception).__name__}: "
                f"{original_exception}"
            )
        super().__init__(error_msg)
