"""List field exceptions."""


class ListFieldError(Exception):
    """Base class for list field errors."""


class SchemaError(ListFieldError, ValueError):
    """Raised when a semantics description cannot be turned into a FieldSchema."""


class RegistryError(ListFieldError):
    """Raised when no field registry is available to create child editors."""


class UnknownFieldTypeError(RegistryError, KeyError):
    """Raised when a field type name has no registered editor class."""
