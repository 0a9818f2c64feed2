"""Failure taxonomy for system name generation; every error denies creation"""


class SystemNameError(Exception):
    """Base class for all fatal name-generation failures."""


class ConfigurationError(SystemNameError):
    """The field identifier list is missing or blank."""


class TypeMismatchError(SystemNameError):
    """The asset being created does not support field extraction."""


class SourceMissingError(SystemNameError):
    """An identifier needs dynamic fields or structured data the page does not have."""

    def __init__(self, identifier: str, source: str):
        self.identifier = identifier
        self.source = source
        super().__init__(
            f"This page contains no {source}, therefore '{identifier}' is an invalid field identifier."
        )


class FieldNotFoundOrEmpty(SystemNameError):
    """An identifier matched no field, or the field holds no value."""

    def __init__(self, identifier: str, label: str):
        self.identifier = identifier
        super().__init__(
            f"The {label} field '{identifier}' either does not exist or contains no value "
            f"in the asset being created."
        )


class NoContentError(SystemNameError):
    """Every identifier normalized to nothing, leaving an empty name."""

    def __init__(self, identifiers: str):
        self.identifiers = identifiers
        super().__init__(f"None of the following fields are populated: {identifiers}")
