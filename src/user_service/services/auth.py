import hmac
from typing import Optional


def validate_token(token: Optional[str], expected: str) -> bool:
    if token is None or not expected:
        return False
    return hmac.compare_digest(token.encode("utf-8"), expected.encode("utf-8"))
