"""
Application errors.
Services raise these; controllers turn them into HTTP responses.
"""


class AcademyError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class NotFoundError(AcademyError):
    """A course, or the courses file, does not exist."""
    status_code = 404


class ValidationError(AcademyError):
    """A contact submission is missing a required field."""
    status_code = 400
