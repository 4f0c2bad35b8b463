"""Sequential access to the parts of a multipart node."""

from email import errors
from typing import Iterator

from jmail.models.message_handle import MessageHandle

from .base import MultipartReadError

# Parser defects that leave a multipart node without usable parts
_BROKEN_MULTIPART_DEFECTS = (
    errors.NoBoundaryInMultipartDefect,
    errors.StartBoundaryNotFoundDefect,
    errors.MultipartInvariantViolationDefect,
)


class MultipartReader:
    """
    Iterate the direct children of a multipart node in stream order.

    Exhausting the iterator means end-of-parts. Structural problems raise
    MultipartReadError, either before the first part or, for a missing
    closing boundary, after the last one.
    """

    def __init__(self, part: MessageHandle, boundary: str):
        """
        Initialize reader.

        Args:
            part: Multipart node to read
            boundary: Boundary parameter from the node's Content-Type
        """
        if not boundary:
            raise MultipartReadError("Multipart boundary is empty")
        self.part = part
        self.boundary = boundary

    def __iter__(self) -> Iterator[MessageHandle]:
        message = self.part.message

        parsed_boundary = message.get_boundary()
        if parsed_boundary is None or parsed_boundary != self.boundary.rstrip():
            raise MultipartReadError(
                f"Boundary mismatch: expected {self.boundary!r}, parser used {parsed_boundary!r}"
            )

        for defect in message.defects:
            if isinstance(defect, _BROKEN_MULTIPART_DEFECTS):
                raise MultipartReadError(f"{type(defect).__name__}: {defect}")

        payload = message.get_payload()
        if not isinstance(payload, list):
            raise MultipartReadError(f"No parts found for boundary {self.boundary!r}")

        unterminated = any(isinstance(defect, errors.CloseBoundaryNotFoundDefect) for defect in message.defects)
        last = len(payload) - 1
        for index, sub_message in enumerate(payload):
            yield MessageHandle(sub_message, unterminated=unterminated and index == last)

        if unterminated:
            raise MultipartReadError(f"Closing boundary {self.boundary!r} not found")
