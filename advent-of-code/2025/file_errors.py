import errno
import sys
from typing import Optional, TextIO

EXIT_OK = 0
EXIT_FILE_ERROR = 1


def read_input_file(filename: str) -> str:
    """Read the whole puzzle input. Any OSError is left to the caller."""
    with open(filename, "r", encoding="utf-8") as f:
        return f.read()


def report_file_error(error: OSError, filename: str, stream: Optional[TextIO] = None) -> int:
    """
    Print a message for a failed read and return the exit code to use.

    Missing files and permission problems get their own hints; anything
    else falls back to the error text.
    """
    if stream is None:
        stream = sys.stderr

    if isinstance(error, FileNotFoundError) or error.errno == errno.ENOENT:
        print(f"Error: File '{filename}' not found", file=stream)
        print("Make sure you're running from the correct directory", file=stream)
    elif isinstance(error, PermissionError) or error.errno in (errno.EACCES, errno.EPERM):
        print(f"Error: Permission denied reading '{filename}'", file=stream)
        print("Check file permissions", file=stream)
    else:
        print(f"Error reading file: {error}", file=stream)
    return EXIT_FILE_ERROR
