"""Errors raised by the tool services"""


class ToolError(Exception):
    """Base exception for tool input errors. The message is shown to the user."""
    pass


class InvalidFormat(ToolError):
    """Raised when input does not have the expected structure."""
    pass


class DecodeFailure(ToolError):
    """Raised when base64, UTF-8 or JSON decoding fails."""
    pass


class UnrecognizedReference(ToolError):
    """Raised when a URL does not belong to a known hosting provider."""
    pass


class DigestFailure(ToolError):
    """Raised when any digest of the hash pipeline cannot be computed."""
    pass


class InputTooLarge(ToolError):
    """Raised when input exceeds a configured limit."""
    pass
