"""Fixed-capacity receive buffer with a readable and a writable region."""

from .codec import SmppLengthError

DEFAULT_CAPACITY = 1024 * 1024


class FlatBuffer:
    """A contiguous byte buffer of fixed capacity.

    Bytes are written into the region returned by prepare(), made readable
    by commit(), read through data() and dropped with consume().
    """

    def __init__(self, capacity=DEFAULT_CAPACITY):
        self._buf = bytearray(capacity)
        self._in = 0
        self._out = 0
        self._last = 0

    @property
    def capacity(self):
        return len(self._buf)

    def clear(self):
        self._in = self._out = self._last = 0

    def data(self):
        """Return a read-only view of the readable bytes."""
        return memoryview(self._buf)[self._in:self._out].toreadonly()

    def __len__(self):
        return self._out - self._in

    def __bytes__(self):
        return bytes(self._buf[self._in:self._out])

    def prepare(self, n):
        """Return a writable view of n bytes after the readable region.

        The readable bytes are moved to the front when the space behind them
        is too small; SmppLengthError is raised when they cannot fit at all.
        """
        if n <= self.capacity - self._out:
            self._last = self._out + n
            return memoryview(self._buf)[self._out:self._last]
        length = len(self)
        if n > self.capacity - length:
            raise SmppLengthError("flat_buffer::prepare buffer overflow")
        if length:
            self._buf[0:length] = self._buf[self._in:self._out]
        self._in = 0
        self._out = length
        self._last = self._out + n
        return memoryview(self._buf)[self._out:self._last]

    def commit(self, n):
        """Make up to n prepared bytes readable."""
        self._out += max(0, min(n, self._last - self._out))

    def consume(self, n):
        """Drop n readable bytes from the front."""
        if n >= len(self):
            self._in = self._out = 0
            return
        self._in += n