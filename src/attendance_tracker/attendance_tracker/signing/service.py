from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Any

from ..common.validators import as_clean_text
from ..core.enums import SignatureScheme
from ..core.exceptions import SignatureError

logger = logging.getLogger(__name__)


class SignatureService:
    """Derive and check the signature that proves a student link was minted by us.

    The default scheme is SHA-256 over ``secret + student_id`` (lower-case hex),
    which keeps links issued by earlier deployments valid. ``hmac-sha256``
    feeds the secret as a separate key instead. Instances hold no per-call
    state, so one service can be shared by every request.
    """

    def __init__(self, secret: str, *, scheme: SignatureScheme | str = SignatureScheme.SHA256_PREFIX):
        if not secret:
            raise ValueError("Signing secret must not be empty")
        self._secret = secret.encode("utf-8")
        self._scheme = SignatureScheme(scheme)
        try:
            hashlib.new("sha256")
        except ValueError as exc:
            raise SignatureError("sha256 is not available in this environment") from exc

    @property
    def scheme(self) -> SignatureScheme:
        return self._scheme

    def sign(self, student_id: Any) -> str:
        message = str(student_id).encode("utf-8")
        if self._scheme == SignatureScheme.HMAC_SHA256:
            return hmac.new(self._secret, message, hashlib.sha256).hexdigest()
        return hashlib.sha256(self._secret + message).hexdigest()

    def verify(self, student_id: Any, signature: Any) -> bool:
        clean_id = as_clean_text(student_id)
        clean_sig = as_clean_text(signature)
        if not clean_id or not clean_sig:
            logger.info("Signature check rejected: missing id or signature")
            return False

        expected = self.sign(clean_id)
        if len(clean_sig) != len(expected):
            logger.info("Signature check rejected for id=%s: length mismatch", clean_id)
            return False

        valid = hmac.compare_digest(clean_sig.encode("utf-8"), expected.encode("utf-8"))
        if not valid:
            logger.info("Signature check rejected for id=%s: mismatch", clean_id)
        return valid
