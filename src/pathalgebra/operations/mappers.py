"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and CLI command wrappers
to ensure consistent error handling across all Typer commands.
"""
from __future__ import annotations

import logging
import typer
from typing import Callable, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)

EXIT_CODES = {
    "ValidationError": 2,
    "ValueError": 2,
    "PathAlgebraError": 2,
    "IncompatiblePathsError": 4,
    "LookaheadError": 5,
    "DuplicateExtensionError": 6,
    "UnknownUserError": 7,
}

def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.
    
    Returns:
    - 2: Invalid input or configuration (ValidationError, ValueError)
    - 3: Unknown error (fallback)
    - 4: Absolute and relative operands mixed (IncompatiblePathsError)
    - 5: Path would go above the reference directory (LookaheadError)
    - 6: Extension listed twice (DuplicateExtensionError)
    - 7: Unknown user in ~user expansion (UnknownUserError)
    
    Args:
        exc: Exception to map
        
    Returns:
        Exit code, with 3 as fallback for unknown exceptions
    """
    return EXIT_CODES.get(type(exc).__name__, 3)

def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.
    
    Executes the given function and maps any exceptions to appropriate
    exit codes using typer.Exit, after printing the error to stderr.
    
    Args:
        func: Function to execute
        
    Returns:
        Function result if successful
        
    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except Exception as e:
        logger.debug(f"Command failed with {type(e).__name__}: {e}")
        from .printers import print_error
        print_error(e)
        raise typer.Exit(code=exit_code_for(e)) from e
