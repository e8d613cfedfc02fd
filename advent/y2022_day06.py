"""Start-of-packet and start-of-message marker detection."""

PACKET_MARKER_LENGTH = 4
MESSAGE_MARKER_LENGTH = 14


def index_of_first_n_unique_chars(data: str, n: int) -> int | None:
    """Return the position just after the first run of ``n`` distinct characters."""
    if n < 1:
        raise ValueError("window size must be positive")
    for start in range(len(data) - n + 1):
        if len(set(data[start : start + n])) == n:
            return start + n
    return None


def _marker_index(data: str, n: int, what: str) -> int:
    index = index_of_first_n_unique_chars(data, n)
    if index is None:
        raise ValueError(f"failed to find {what} start")
    return index


def packet_start_index(data: str) -> int:
    return _marker_index(data, PACKET_MARKER_LENGTH, "packet")


def message_start_index(data: str) -> int:
    return _marker_index(data, MESSAGE_MARKER_LENGTH, "message")


def part1(text: str) -> str:
    return str(packet_start_index(text))


def part2(text: str) -> str:
    return str(message_start_index(text))