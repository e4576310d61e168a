class Rmid3tagError(Exception): ...

class ReadError(Rmid3tagError, OSError):
    """A probe could not read the number of bytes it needs."""

class FormatError(Rmid3tagError, ValueError):
    """The file does not contain a locatable MPEG frame stream."""

class EncodingError(Rmid3tagError, ValueError):
    """Text cannot be represented in the frame text encoding."""
