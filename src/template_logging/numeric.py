"""
Locale-free decimal encoding straight into reusable byte buffers

Nothing here allocates a result: digits are written into caller-owned
``bytearray`` storage, and nothing is null-terminated.
"""

DIGITS = b"0123456789"

# "00" through "99"; the pair for n starts at index 2 * n
DIGIT_PAIRS = (
    b"00010203040506070809"
    b"10111213141516171819"
    b"20212223242526272829"
    b"30313233343536373839"
    b"40414243444546474849"
    b"50515253545556575859"
    b"60616263646566676869"
    b"70717273747576777879"
    b"80818283848586878889"
    b"90919293949596979899"
)


def two_digits(buf: bytearray, offset: int, value: int) -> None:
    """Write value (0-99) as exactly two digits at buf[offset]"""
    index = (value % 100) * 2
    buf[offset] = DIGIT_PAIRS[index]
    buf[offset + 1] = DIGIT_PAIRS[index + 1]


def write_fixed_width(buf: bytearray, offset: int, width: int, value: int) -> None:
    """
    Write exactly ``width`` digits of value at buf[offset]

    The caller guarantees the value fits; wider values keep only their
    low ``width`` digits.
    """
    i = offset + width
    # Two digits per division
    while i - offset >= 2:
        value, rem = divmod(value, 100)
        i -= 2
        buf[i] = DIGIT_PAIRS[rem * 2]
        buf[i + 1] = DIGIT_PAIRS[rem * 2 + 1]
    if i > offset:
        buf[offset] = DIGITS[value % 10]


def write_variable_width(buf: bytearray, offset: int, value: int) -> int:
    """
    Write value with no leading zeros at buf[offset] and return the
    number of bytes written

    Digits are produced right to left at the tail of buf and then moved
    into place, so buf must have room for them after offset.
    """
    if value < 0:
        buf[offset] = 0x2D  # '-'
        return write_variable_width(buf, offset + 1, -value) + 1

    end = len(buf)
    j = end
    while value >= 100:
        value, rem = divmod(value, 100)
        j -= 2
        if j < offset:
            raise ValueError("buffer too small for value")
        buf[j] = DIGIT_PAIRS[rem * 2]
        buf[j + 1] = DIGIT_PAIRS[rem * 2 + 1]

    if value < 10:
        j -= 1
        if j < offset:
            raise ValueError("buffer too small for value")
        buf[j] = DIGITS[value]
    else:
        j -= 2
        if j < offset:
            raise ValueError("buffer too small for value")
        buf[j] = DIGIT_PAIRS[value * 2]
        buf[j + 1] = DIGIT_PAIRS[value * 2 + 1]

    count = end - j
    if j != offset:
        buf[offset : offset + count] = buf[j:end]
    return count
