#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdliteral library.

Exception Hierarchy
-------------------
- MdLiteralError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser, renderer or plugin)

  - ParsingError (markdown parsing failures)

  - RenderingError (markdown serialization failures)

  - PluginError (plugin lookup and loading failures)

The literal-character plugin itself raises none of these: its functions are
total over well-formed trees, and failures raised by the host pipeline
propagate to the caller unchanged.

"""

from typing import Any


class MdLiteralError(Exception):
    """Base exception class for all mdliteral-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdLiteralError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong class is provided.

    Parameters
    ----------
    component_name : str
        Name of the component that rejected the options (e.g. "markdown")
    expected_type : type
        The options class the component accepts
    received_type : type
        The class of the object that was passed

    """

    def __init__(self, component_name: str, expected_type: type, received_type: type):
        """Initialize with the component name and both option classes."""
        message = (
            f"Invalid options type for '{component_name}': "
            f"expected {expected_type.__name__}, got {received_type.__name__}"
        )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(MdLiteralError):
    """Exception raised when markdown input cannot be turned into a tree."""


class RenderingError(MdLiteralError):
    """Exception raised when a tree cannot be serialized back to markdown.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    node_type : str, optional
        Type tag of the node being serialized when the failure happened
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, node_type: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.node_type = node_type


class PluginError(MdLiteralError):
    """Exception raised when a plugin cannot be found or loaded.

    Parameters
    ----------
    message : str
        Description of the failure
    plugin_name : str, optional
        Name the plugin was requested under

    """

    def __init__(self, message: str, plugin_name: str | None = None, original_error: Exception | None = None):
        """Initialize the plugin error."""
        super().__init__(message, original_error)
        self.plugin_name = plugin_name


__all__ = [
    "MdLiteralError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "PluginError",
]
