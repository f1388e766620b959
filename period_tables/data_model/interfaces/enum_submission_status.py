from enum import Enum


class SubmissionStatus(Enum):
    """
    Overall status reported to the caller after a submission.
    """
    VALID = "valid"
    INVALID = "invalid"

    @property
    def message(self) -> str:
        return self.value.capitalize()
