"""Exceptions raised by annogen"""

from typing import Optional


class AnnogenError(Exception):
    """Base class for annogen errors"""

    pass


class InvalidRuleError(AnnogenError):
    """Raised when an annotation rule is malformed.

    Rules are not validated when a convention is attached to a template, so
    this surfaces at render time and aborts generation for the element.
    """

    def __init__(
        self,
        detail: str,
        *,
        convention: Optional[str] = None,
        rule_index: Optional[int] = None,
    ) -> None:
        where = "annotation"
        if rule_index is not None:
            where = f"rule {rule_index}"
        if convention is not None:
            where += f" of convention '{convention}'"
        super().__init__(f"Invalid {where}: {detail}")
        self.detail = detail
        self.convention = convention
        self.rule_index = rule_index


class ConventionNotFoundError(AnnogenError):
    """Raised when a convention is required but cannot be resolved"""

    def __init__(self, name: Optional[str]) -> None:
        if name is None:
            message = "No annotation convention selected"
        else:
            message = f"Annotation convention not found: {name}"
        super().__init__(message)
        self.name = name


class ConfigNotFoundError(AnnogenError):
    """Raised when the settings file doesn't exist"""

    pass


class ConfigInvalidError(AnnogenError):
    """Raised when the settings file is invalid"""

    pass


class TemplateConfigError(AnnogenError):
    """Raised when a template override has the wrong shape"""

    pass
