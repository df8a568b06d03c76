"""Exception types and error formatting utilities.

Every failure raised by autoinstall derives from AutoinstallError. Nothing in
the installer recovers locally: errors surface unchanged to the caller, and
only the CLI layer turns them into messages and exit codes.

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Use present tense: 'must be', 'is required'
- Include actionable hints where helpful
"""


class AutoinstallError(Exception):
    """Base class for all autoinstall failures."""


class ModuleNotFound(AutoinstallError):
    """Raised by a module locator when an identifier cannot be resolved.

    This is the only locator failure the classifier interprets; it means
    "keep going, the module may need installing".
    """

    def __init__(self, identifier: str):
        super().__init__(f"Cannot find module '{identifier}'")
        self.identifier = identifier


class ResolutionError(AutoinstallError):
    """Raised when module resolution fails for a reason other than not found."""


class ManifestError(ResolutionError):
    """Raised when package.json is missing or cannot be parsed."""


class ConfigError(AutoinstallError):
    """Raised when .autoinstallrc or .babelrc loading or validation fails."""


class ProcessFailure(AutoinstallError):
    """Raised when an external command exits nonzero or cannot be spawned."""

    def __init__(self, command: list[str], returncode: int | None, message: str = ""):
        self.command = command
        self.returncode = returncode
        detail = message or f"exited with status {returncode}"
        super().__init__(f"Command '{' '.join(command)}' {detail}")


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Examples:
        >>> format_error("package.json not found")
        'Error: package.json not found'
    """
    return f"Error: {message}"


def format_field_error(entity: str, field: str, issue: str) -> str:
    """Format a field validation error with structured format.

    Examples:
        >>> format_field_error(".autoinstallrc", "registry", "must be a string")
        ".autoinstallrc field 'registry' must be a string"
    """
    return f"{entity} field '{field}' {issue}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Examples:
        >>> format_suggestion("package.json not found", "run 'autoinstall init' to create one")
        "Error: package.json not found. Hint: run 'autoinstall init' to create one"
    """
    return f"{format_error(message)}. Hint: {suggestion}"


__all__ = [
    "AutoinstallError",
    "ModuleNotFound",
    "ResolutionError",
    "ManifestError",
    "ConfigError",
    "ProcessFailure",
    "format_error",
    "format_field_error",
    "format_suggestion",
]
