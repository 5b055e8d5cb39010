from typing import List, Optional

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6
# bcrypt only reads this many bytes of a password
PASSWORD_MAX_BYTES = 72


def validate_username(username: str) -> tuple[bool, Optional[List[str]]]:
    """
    Validate username against defined rules

    Username Rules:
    - At least 3 characters long, ignoring surrounding whitespace

    Returns:
        tuple: (is_valid, list_of_error_messages)
    """
    errors = []

    if len(username.strip()) < USERNAME_MIN_LENGTH:
        errors.append(f"Username must be at least {USERNAME_MIN_LENGTH} characters long")

    is_valid = len(errors) == 0
    return is_valid, errors if not is_valid else None


def validate_password(password: str) -> tuple[bool, Optional[List[str]]]:
    """
    Validate password against defined rules

    Password Rules:
    - At least 6 characters long
    - At most 72 bytes once UTF-8 encoded
    - No NUL characters

    Returns:
        tuple: (is_valid, list_of_error_messages)
    """
    errors = []

    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")

    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        errors.append(f"Password must be at most {PASSWORD_MAX_BYTES} bytes long")

    if "\x00" in password:
        errors.append("Password must not contain NUL characters")

    is_valid = len(errors) == 0
    return is_valid, errors if not is_valid else None
