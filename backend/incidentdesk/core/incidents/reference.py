import random
import re
from datetime import datetime

REFERENCE_PREFIX = "INC"
REFERENCE_MIN = 100
REFERENCE_MAX = 999
REFERENCE_PATTERN = r"^INC-\d{4}-\d{3}$"

_reference_re = re.compile(REFERENCE_PATTERN)


def generate_reference_id(now: datetime | None = None) -> str:
    """Return ``INC-<year>-<n>`` with ``n`` drawn uniformly from [100, 999].

    No uniqueness check happens here; the service layer deals with collisions.
    """
    year = (now or datetime.now()).year
    return f"{REFERENCE_PREFIX}-{year}-{random.randint(REFERENCE_MIN, REFERENCE_MAX)}"


def is_reference_id(value: str) -> bool:
    return bool(_reference_re.match(value))
