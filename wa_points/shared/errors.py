"""
Scoring errors.

Every calculation failure is a ScoringError subclass with a stable
``code`` so hosts (API, CLI) can render it without string matching.
"""


class ScoringError(ValueError):
    """Base scoring error."""
    code = "scoring_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class UnknownEventError(ScoringError):
    """Event id (for the given gender) is not in the catalog."""
    code = "unknown_event"


class EmptyInputError(ScoringError):
    """Performance text is empty or whitespace."""
    code = "empty_input"


class MalformedFormatError(ScoringError):
    """Wrong separator count or a non-numeric component."""
    code = "malformed_format"


class OutOfRangeComponentError(ScoringError):
    """Minutes or seconds component is 60 or more."""
    code = "out_of_range_component"


class NonPositiveValueError(ScoringError):
    """Performance is zero or negative."""
    code = "non_positive_value"


class OutOfScaleError(ScoringError):
    """Performance or modifier too large for the points formula to evaluate."""
    code = "out_of_scale"


class InapplicableModifierError(ScoringError):
    """Wind or elevation given for an event that does not use it."""
    code = "inapplicable_modifier"


class InvalidPlaceError(ScoringError):
    """Place (or final size) below 1."""
    code = "invalid_place"


class UnknownCategoryError(ScoringError):
    """Competition category id is not known."""
    code = "unknown_category"


class CatalogIntegrityError(Exception):
    """Static scoring data is inconsistent (raised at load time)."""
    pass
