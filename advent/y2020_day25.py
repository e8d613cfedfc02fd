"""Door and card handshake: recovering the shared encryption key."""

MODULUS = 20201227
SUBJECT_NUMBER = 7


def parse_public_keys(text: str) -> tuple[int, int]:
    """Parse the card and door public keys from the first two lines."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("two public keys are required")
    return int(lines[0]), int(lines[1])


def find_loop_size(public_key: int) -> int:
    """Return the smallest loop size that transforms 7 into ``public_key``."""
    if not 1 <= public_key < MODULUS:
        raise ValueError(f"public key {public_key} is out of range")
    value = 1
    loops = 0
    while True:
        value = value * SUBJECT_NUMBER % MODULUS
        loops += 1
        if value == public_key:
            return loops
        if value == 1:
            raise ValueError(f"public key {public_key} cannot be produced")


def transform(subject_number: int, loop_size: int) -> int:
    """Apply the handshake transform ``loop_size`` times to ``subject_number``."""
    return pow(subject_number, loop_size, MODULUS)


def find_encryption_key(public_key1: int, public_key2: int) -> int:
    """Return the encryption key both parties derive."""
    key = transform(public_key2, find_loop_size(public_key1))
    other = transform(public_key1, find_loop_size(public_key2))
    if key != other:
        raise ValueError("the two parties derive different encryption keys")
    return key


def part1(text: str) -> str:
    return str(find_encryption_key(*parse_public_keys(text)))


def part2(text: str) -> str:
    parse_public_keys(text)
    return ""