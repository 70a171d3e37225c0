"""
Input shapes for creating and updating movies.

Every field is optional; None means the client did not supply it, which is
what lets an update touch only the fields that were sent.
"""

import os
from dataclasses import dataclass
from typing import BinaryIO, Optional


@dataclass
class PosterUpload:
    """An uploaded poster file that has not been read yet."""

    filename: str
    stream: BinaryIO
    size: Optional[int] = None

    @property
    def extension(self) -> str:
        """Lower-cased file extension including the dot, e.g. '.png'."""
        return os.path.splitext(self.filename)[1].lower()

    @property
    def length(self) -> int:
        """Byte length of the upload, measured from the stream if unknown."""
        if self.size is None:
            position = self.stream.tell()
            self.stream.seek(0, os.SEEK_END)
            self.size = self.stream.tell()
            self.stream.seek(position)
        return self.size

    def read(self) -> bytes:
        """Read the whole upload into memory."""
        self.stream.seek(0)
        return self.stream.read()


@dataclass
class MovieSubmission:
    """Movie fields as submitted by the client."""

    title: Optional[str] = None
    year: Optional[int] = None
    storyline: Optional[str] = None
    rate: Optional[float] = None
    genre_id: Optional[int] = None
    poster: Optional[PosterUpload] = None
