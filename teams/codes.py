# teams/codes.py
import secrets
import string

JOIN_CODE_ALPHABET = string.ascii_lowercase
JOIN_CODE_LENGTH = 7


def generate_join_code() -> str:
    """Random 7-letter lowercase join code."""
    return "".join(secrets.choice(JOIN_CODE_ALPHABET) for _ in range(JOIN_CODE_LENGTH))


def is_join_code(value: str) -> bool:
    return (
        isinstance(value, str)
        and len(value) == JOIN_CODE_LENGTH
        and all(ch in JOIN_CODE_ALPHABET for ch in value)
    )
