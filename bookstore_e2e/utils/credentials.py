import random

from ..core.types import Credentials


def generate_random_credentials() -> Credentials:
    """Unique-enough username/password pair that satisfies the site's password rules."""
    suffix = random.randrange(10**9)
    return {
        "username": f"testuser_{suffix}",
        "password": f"TestPassword{suffix}!",
    }
