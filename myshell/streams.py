"""In-memory output streams that builtins write to"""

import io
from typing import Union


class OutputStream:
    """
    Collects text or bytes written by a builtin.

    The dispatcher renders the collected data once the builtin returns.

    Usage:
        stream = OutputStream.to_buffer()
        stream.write("hello\\n")
        stream.write(b"world\\n")
        stream.get_text()  # 'hello\\nworld\\n'
    """

    def __init__(self, buffer: io.BytesIO):
        self.buffer = buffer

    @classmethod
    def to_buffer(cls) -> 'OutputStream':
        return cls(io.BytesIO())

    def write(self, data: Union[str, bytes]) -> int:
        """
        Write data to the buffer.

        Args:
            data: Text (encoded as UTF-8) or raw bytes

        Returns:
            Number of bytes written
        """
        if isinstance(data, str):
            data = data.encode('utf-8')
        return self.buffer.write(data)

    def flush(self):
        """Flush the buffer (no-op for in-memory buffers)."""
        self.buffer.flush()

    def get_value(self) -> bytes:
        """Get everything written so far"""
        return self.buffer.getvalue()

    def get_text(self) -> str:
        """Get everything written so far, decoded with replacement"""
        return self.get_value().decode('utf-8', errors='replace')


class ErrorStream(OutputStream):
    """Output stream for error messages"""
    pass
