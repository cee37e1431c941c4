import secrets

RANDOM_STRING_SOURCE = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#$%^&*()-_=+"


def random_string(length: int, alphabet: str = RANDOM_STRING_SOURCE) -> str:
    """
    Return `length` characters picked independently from `alphabet`.
    secrets.choice draws from the OS CSPRNG with rejection sampling, so the
    pick is unbiased.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return "".join(secrets.choice(alphabet) for _ in range(length))
