"""
Fixed-capacity output accumulator.
"""

from .errors import TranslationOverflowError


class OutputBuffer:
    """
    Byte accumulator with an explicit capacity.

    Appends are checked against the capacity before anything is written.
    Used as a context manager, the storage is zeroed and emptied on exit,
    so scratch output never outlives the translation that produced it.
    """

    def __init__(self, capacity: int):
        """
        Initialize buffer.

        Args:
            capacity: Maximum number of bytes the buffer may hold
        """
        if capacity <= 0:
            raise ValueError(f"Invalid capacity: {capacity}. Must be > 0.")
        self.capacity = capacity
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def __enter__(self) -> 'OutputBuffer':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    @property
    def free(self) -> int:
        """Bytes left before the buffer is full."""
        return self.capacity - len(self._data)

    def fits(self, size: int) -> bool:
        """Check whether ``size`` more bytes can be appended."""
        return size <= self.free

    def append(self, chunk: bytes) -> int:
        """
        Append a chunk.

        Args:
            chunk: Bytes to append

        Returns:
            Number of bytes written

        Raises:
            TranslationOverflowError: If the chunk does not fit
        """
        if not self.fits(len(chunk)):
            raise TranslationOverflowError(
                f"Output capacity of {self.capacity} bytes exceeded "
                f"({len(self._data)} written, {len(chunk)} more requested)"
            )
        self._data.extend(chunk)
        return len(chunk)

    def getvalue(self) -> bytes:
        """Copy of the bytes written so far."""
        return bytes(self._data)

    def clear(self) -> None:
        """Zero and empty the storage."""
        self._data[:] = bytes(len(self._data))
        self._data.clear()
