"""Custom exceptions for oasmodel.

The document model itself performs almost no validation; the exceptions
defined here cover the few misuse cases it does reject, plus the errors
raised while loading settings.
"""


class OASModelError(Exception):
    """Base exception for all oasmodel errors.

    All exceptions raised by oasmodel inherit from this class, making it easy
    to catch all oasmodel-related errors with a single except clause.

    Example:
        try:
            operation.add_extension('vendor-id', 42)
        except OASModelError as e:
            print(f"oasmodel error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InvalidExtensionError(OASModelError, ValueError):
    """A vendor extension key does not start with ``x-``.

    Also a ``ValueError`` so that pydantic reports it as a regular
    validation error when it is raised while loading a document.

    Attributes:
        name: The rejected key.
    """

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Invalid extension name {name!r}: must start with 'x-'")


class UnsupportedModelError(OASModelError, TypeError):
    """Asked the factory for something that is not a document model type.

    Attributes:
        model: The object that was passed to the factory.
    """

    def __init__(self, model: object):
        self.model = model
        name = getattr(model, '__name__', repr(model))
        super().__init__(f'Unsupported model type: {name}')


class ConfigurationError(OASModelError):
    """Error in configuration.

    This exception is raised when the settings file is invalid or
    cannot be loaded.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class ReservedKeyError(OASModelError, ValueError):
    """A keyed entry uses a name reserved for vendor extensions.

    Response codes and callback expressions share their object with
    vendor extensions, so they cannot start with ``x-``.

    Attributes:
        key: The rejected key.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Invalid key {key!r}: keys starting with 'x-' are vendor extensions")
