import hashlib
import hmac
import secrets

# Work factor for PBKDF2. Changing it only affects newly hashed passwords.
PBKDF2_ITERATIONS = 100_000
_ALGORITHM = "pbkdf2_sha256"


def _digest(password: str, salt: bytes, iterations: int) -> str:
    return hashlib.pbkdf2_hmac("sha256", password.encode(), salt, iterations).hex()


def hash_password(password: str) -> str:
    """Return `pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>` for a plaintext password."""
    salt = secrets.token_bytes(16)
    digest = _digest(password, salt, PBKDF2_ITERATIONS)
    return f"{_ALGORITHM}${PBKDF2_ITERATIONS}${salt.hex()}${digest}"


def verify_password(password: str, stored: str) -> bool:
    try:
        algorithm, iterations, salt_hex, digest = stored.split("$")
        if algorithm != _ALGORITHM:
            return False
        candidate = _digest(password, bytes.fromhex(salt_hex), int(iterations))
    except (AttributeError, ValueError):
        return False
    return hmac.compare_digest(candidate, digest)
