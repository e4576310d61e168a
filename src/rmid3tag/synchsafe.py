def decode_synchsafe(data: bytes, size: int = 4) -> int:
    out = 0
    for i in range(size):
        out |= (data[i] & 0x7F) << (7 * (size - 1 - i))
    return out

def encode_synchsafe(value: int, size: int = 4) -> bytes:
    return bytes((value >> (7 * (size - 1 - i))) & 0x7F for i in range(size))
