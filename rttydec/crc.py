"""CRC-16/CCITT checksum used by telemetry sentences."""


def crc(text):
    """Return the CRC-16/CCITT (init 0xFFFF, poly 0x1021) as four upper-case hex digits."""
    data = text.encode("latin-1") if isinstance(text, str) else bytes(text)
    value = 0xFFFF
    for byte in data:
        value ^= byte << 8
        for _ in range(8):
            if value & 0x8000:
                value = ((value << 1) ^ 0x1021) & 0xFFFF
            else:
                value = (value << 1) & 0xFFFF
    return f"{value:04X}"