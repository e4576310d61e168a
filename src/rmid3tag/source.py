from typing import BinaryIO, Protocol


class ByteSource(Protocol):
    def read_at(self, offset: int, size: int) -> bytes: ...


class FileByteSource:
    """Random-access reads over an open binary file handle."""

    def __init__(self, fh: BinaryIO):
        self.fh = fh

    def read_at(self, offset: int, size: int) -> bytes:
        self.fh.seek(offset)
        return self.fh.read(size)


class MemoryByteSource:
    def __init__(self, data: bytes):
        self.data = bytes(data)

    def __len__(self) -> int:
        return len(self.data)

    def read_at(self, offset: int, size: int) -> bytes:
        return self.data[offset:offset + size]
