"""Error taxonomy for task operations"""


class TaskError(Exception):
    """Base class for errors raised by the task service"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskError):
    """Required input is missing or malformed"""


class NotFound(TaskError):
    """No task matches the identifier (including malformed identifiers)"""

    def __init__(self, message: str = "Task not found"):
        super().__init__(message)


class StoreFailure(TaskError):
    """The document store is unavailable or the operation failed"""
