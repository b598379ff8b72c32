from __future__ import annotations

import random
import string
from typing import Optional


class EmployeeCodeGenerator:
    """Produce short employee codes such as ``4SXQFMf``.

    Pattern: one digit, five uppercase letters, one lowercase letter.
    Uniqueness is not guaranteed here; callers check the directory and retry.
    """

    LENGTH = 7

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.SystemRandom()

    def generate(self) -> str:
        head = self._rng.choice(string.digits)
        middle = "".join(self._rng.choice(string.ascii_uppercase) for _ in range(5))
        tail = self._rng.choice(string.ascii_lowercase)
        return f"{head}{middle}{tail}"
