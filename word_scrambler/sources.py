"""Input acquisition: turn file names (or stdin) into one text.

WHY: The scrambler works on a single in-memory text. Users hand it one or
more files, or pipe text in. Reading must either fully succeed or fail
before any scrambling starts.

HOW: read_sources() reads every named file completely and joins their
contents with a newline. With no names it reads the whole default stream.
"-" as a name means standard input.

RULES:
- Files are joined with SOURCE_SEPARATOR ("\\n"), contents taken verbatim
- Any unreadable file raises SourceError naming the path
- Nothing is returned until every source has been read
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, List, Optional, Sequence, Union

from word_scrambler.config import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

SOURCE_SEPARATOR = "\n"
STDIN_NAME = "-"


class SourceError(ValueError):
    """An input source could not be read."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__("Cannot read {}: {}".format(self.path, reason))


def read_source(
    path: Union[str, Path],
    stdin: Optional[IO[str]] = None,
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """Read one source completely.

    Args:
        path: File path, or "-" for standard input.
        stdin: Stream used for "-" (defaults to sys.stdin).
        encoding: Encoding for files.

    Raises:
        SourceError: If the file is missing, unreadable or not decodable.
    """
    if str(path) == STDIN_NAME:
        stream = stdin if stdin is not None else sys.stdin
        return stream.read()

    file_path = Path(path)
    try:
        content = file_path.read_text(encoding=encoding)
    except FileNotFoundError:
        raise SourceError(path, "file not found") from None
    except IsADirectoryError:
        raise SourceError(path, "is a directory") from None
    except PermissionError:
        raise SourceError(path, "permission denied") from None
    except UnicodeDecodeError as e:
        raise SourceError(path, "not valid {} ({})".format(encoding, e.reason)) from None
    except LookupError:
        raise SourceError(path, "unknown encoding '{}'".format(encoding)) from None
    except OSError as e:
        raise SourceError(path, e.strerror or str(e)) from None

    logger.debug("Read %d character(s) from %s", len(content), file_path)
    return content


def read_sources(
    paths: Sequence[Union[str, Path]],
    stdin: Optional[IO[str]] = None,
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """Read all sources and join them into a single text.

    WHY: The core takes exactly one string, whatever the number of inputs.

    HOW: Reads each path in order via read_source(), then joins with
    SOURCE_SEPARATOR. With an empty ``paths`` the default stream is read.

    Args:
        paths: Files to read, in order. May be empty.
        stdin: Default stream (defaults to sys.stdin).
        encoding: Encoding for files.

    Returns:
        The combined text.

    Raises:
        SourceError: On the first source that cannot be read.
    """
    if not paths:
        return read_source(STDIN_NAME, stdin=stdin, encoding=encoding)

    contents: List[str] = [
        read_source(path, stdin=stdin, encoding=encoding) for path in paths
    ]
    return SOURCE_SEPARATOR.join(contents)
