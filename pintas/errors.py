class PintasError(Exception):
    """Base exception for pintas errors. Carries the process exit code."""

    exit_code = 1


class AliasNotFoundError(PintasError):
    """Raised when an alias is not present in the table."""

    def __init__(self, name: str):
        super().__init__(f"Alias '{name}' not found.")
        self.name = name


class InvalidAliasError(PintasError):
    """Raised when an alias name could not be typed as a shell word."""

    exit_code = 64


class UnsupportedShellError(PintasError):
    """Raised when shell integration is requested for an unknown shell."""

    exit_code = 64

    def __init__(self, shell: str):
        super().__init__(f"Shell '{shell}' not supported.")
        self.shell = shell


class ParseError(PintasError):
    """Raised when the configuration file is not valid alias TOML."""

    exit_code = 65


class StorageError(PintasError):
    """Raised when the configuration file cannot be read or written."""

    exit_code = 74


class LaunchError(PintasError):
    """Raised when the shell for an alias cannot be started."""

    exit_code = 126
