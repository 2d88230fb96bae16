# assignments/exceptions.py


class AssignmentError(Exception):
    """
    Base error of the assignment engine.

    Carries a stable machine-readable `code`, the HTTP status it maps to and
    any extra context (offending ids, duplicates, partial results) that the
    caller needs to act on it.
    """
    code = "assignment_error"
    status_code = 400
    default_message = "Assignment failed."

    def __init__(self, message=None, **context):
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)

    def as_data(self):
        return {"detail": self.message, "code": self.code, **self.context}


class InvalidIdentifier(AssignmentError):
    code = "invalid_identifier"
    default_message = "Invalid identifier."


class NotFound(AssignmentError):
    code = "not_found"
    status_code = 404
    default_message = "Not found."


class ValidationFailed(AssignmentError):
    code = "validation_failed"
    default_message = "Validation failed."


class AllAssignmentsExist(ValidationFailed):
    code = "all_assignments_exist"
    default_message = "All assignments already exist for this year, semester, and program"

    def __init__(self, duplicates, message=None):
        super().__init__(message, duplicateAssignments=duplicates)


class EmptyInput(AssignmentError):
    code = "empty_input"
    default_message = "Nothing to assign."


class AllocationTimeout(AssignmentError):
    code = "allocation_timeout"
    status_code = 503
    default_message = "Assignment run exceeded its time limit; nothing was saved."

    def __init__(self, partial, message=None):
        super().__init__(message, partialAssignments=partial)


def parse_id(value, label="id"):
    """Positive integer id, or InvalidIdentifier."""
    if isinstance(value, bool):
        raise InvalidIdentifier(f"Invalid {label}: {value}", **{label: value})
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise InvalidIdentifier(f"Invalid {label}: {value}", **{label: value})
    if parsed <= 0 or str(parsed) != str(value).strip():
        raise InvalidIdentifier(f"Invalid {label}: {value}", **{label: value})
    return parsed
