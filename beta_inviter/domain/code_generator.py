import secrets
import string

CODE_ALPHABET = string.ascii_uppercase + string.digits
DEFAULT_PREFIX = "NA"
DEFAULT_SUFFIX_LENGTH = 5


def generate_invite_code(
    prefix: str = DEFAULT_PREFIX, length: int = DEFAULT_SUFFIX_LENGTH
) -> str:
    """
    Generate an invite code: prefix followed by `length` random characters
    drawn uniformly from A-Z0-9.

    Codes are not unique by construction; the invite_codes unique constraint
    decides, and callers regenerate on conflict.
    """
    if length < 1:
        raise ValueError("length must be positive")
    suffix = "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))
    return f"{prefix.upper()}{suffix}"
