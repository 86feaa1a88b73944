# catr/cli/decorators.py
# CLI decorators for error handling

import functools
from typing import Callable, TypeVar, Any, cast

import click
from rich.markup import escape

from ..core.exceptions import (
    CatrError,
    ConfigurationError,
    JSONParsingError,
    StreamReadError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling catr errors in CLI commands w/ Rich output on stderr
def handle_catr_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..catr_io.console import console

        try:
            return func(*args, **kwargs)
        except (click.exceptions.Exit, click.exceptions.Abort, click.ClickException):
            # usage errors & explicit exits keep Click's own exit codes
            raise
        except StreamReadError as e:
            console.print(format_error_message("Read Error", escape(str(e))))
            raise SystemExit(1)
        except ConfigurationError as e:
            console.print(format_error_message("Configuration Error", escape(str(e))))
            raise SystemExit(1)
        except JSONParsingError as e:
            console.print(format_error_message("JSON Parsing Error", escape(str(e))))
            raise SystemExit(1)
        except FileOperationError as e:
            console.print(format_error_message("File Error", escape(str(e))))
            raise SystemExit(1)
        except CatrError as e:
            console.print(format_error_message("Error", escape(str(e))))
            raise SystemExit(1)
        except Exception as e:
            console.print(format_error_message("Unexpected Error", escape(str(e))))
            raise SystemExit(1)

    return cast(F, wrapper)
