"""
bcrypt password hashing.
"""

import bcrypt

# bcrypt ignores everything past 72 bytes; newer releases reject it instead
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher:
    """Salted bcrypt hashing with a configurable cost factor."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, plain_password: str) -> str:
        return bcrypt.hashpw(_encode(plain_password), bcrypt.gensalt(rounds=self.rounds)).decode(
            "utf-8"
        )

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(plain_password), hashed_password.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
