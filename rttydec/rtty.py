"""Asynchronous serial framing: start bit, data bits LSB first, stop bits."""

import math


class RTTY:
    """Assembles characters from a stream of bits."""

    def __init__(self, bits=0, stops=0):
        self.ascii_bits = int(bits)
        self.ascii_stops = float(stops)
        self._bits = []
        self._chars = bytearray()

    def push(self, bits):
        """Append received bits."""
        self._bits.extend(int(bool(b)) for b in bits)

    def __len__(self):
        return len(self._chars)

    def get(self):
        """Remove and return the decoded characters as bytes."""
        result = bytes(self._chars)
        self._chars.clear()
        return result

    def __call__(self):
        return self.process()

    def process(self):
        """Decode every complete frame in the buffer and return how many were found."""
        nbits = self.ascii_bits
        nstops = self.ascii_stops
        if not nbits and not nstops:
            return 0
        bits = self._bits
        if len(bits) < 1 + nbits + nstops:
            return 0

        stop_checks = math.ceil(nstops)
        decoded = 0
        last = 0
        i = 0
        while i < len(bits):
            is_frame = (
                bits[i] == 0
                and i + 1 + nbits + nstops <= len(bits)
                and all(b == 1 for b in bits[i + 1 + nbits: i + 1 + nbits + stop_checks])
            )
            if not is_frame:
                i += 1
                continue
            i += 1
            value = sum(bit << k for k, bit in enumerate(bits[i:i + nbits]))
            i += nbits
            self._chars.append(value & 0xFF)
            decoded += 1
            i = int(i + nstops)
            last = i - 1

        if last:
            del bits[: last + 1]
        return decoded