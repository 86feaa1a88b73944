# catr/core/exceptions.py
# Custom exception hierarchy for catr (pure - no I/O operations)

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for catr
class CatrError(Exception):
    pass


# * Configuration errors
class ConfigurationError(CatrError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(CatrError):
    pass


# * Base error for file I/O operations
class FileOperationError(CatrError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Source could not be opened; recoverable, the run skips it
class SourceUnavailableError(FileOperationError):
    def __init__(self, identifier: str, reason: str):
        super().__init__(f"{identifier}: {reason}", identifier)
        self.identifier = identifier
        self.reason = reason


# * I/O failure while reading an opened source; fatal for the whole run
class StreamReadError(FileOperationError):
    def __init__(self, identifier: str, reason: str):
        super().__init__(f"{identifier}: {reason}", identifier)
        self.identifier = identifier
        self.reason = reason
