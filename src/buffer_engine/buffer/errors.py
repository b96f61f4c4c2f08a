"""Errors raised by the buffer layer."""

from __future__ import annotations

import os
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class DocumentIOError(RuntimeError):
    """Raised when a document cannot be read from or written to its file."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[PathLike] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause
