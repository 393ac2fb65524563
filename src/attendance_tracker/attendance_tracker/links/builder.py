from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple
from urllib.parse import parse_qs, quote, urlsplit

from flask import has_request_context, request

from ..common.validators import as_clean_text
from ..core.constants import STUDENT_INFO_PATH
from ..core.exceptions import LinkGenerationError
from ..signing.service import SignatureService

logger = logging.getLogger(__name__)


def request_origin() -> Optional[str]:
    """Origin of the Flask request being served, if any."""
    if not has_request_context():
        return None
    return request.host_url.rstrip("/")


@dataclass(frozen=True)
class CapabilityLink:
    student_id: str
    signature: str
    base_origin: str

    @property
    def path(self) -> str:
        return f"{STUDENT_INFO_PATH}?id={quote(self.student_id, safe='')}&sig={quote(self.signature, safe='')}"

    @property
    def url(self) -> str:
        return f"{self.base_origin}{self.path}"


class CapabilityLinkBuilder:
    def __init__(
        self,
        signer: SignatureService,
        *,
        default_origin: str,
        origin_resolver: Callable[[], Optional[str]] = request_origin,
    ):
        if not default_origin:
            raise ValueError("PUBLIC_BASE_URL must be configured")
        self._signer = signer
        self._default_origin = default_origin.rstrip("/")
        self._origin_resolver = origin_resolver

    def resolve_origin(self) -> str:
        return (self._origin_resolver() or self._default_origin).rstrip("/")

    def build(self, student_id: Any, base_origin: Optional[str] = None) -> CapabilityLink:
        clean_id = as_clean_text(student_id)
        if not clean_id:
            raise LinkGenerationError("Student ID is required")
        origin = (base_origin or self.resolve_origin()).rstrip("/")
        return CapabilityLink(student_id=clean_id, signature=self._signer.sign(clean_id), base_origin=origin)

    def build_path(self, student_id: Any) -> str:
        return self.build(student_id, base_origin=self._default_origin).path

    def build_url(self, student_id: Any, base_origin: Optional[str] = None) -> str:
        link = self.build(student_id, base_origin)
        logger.debug("Built capability link for student id=%s", link.student_id)
        return link.url


def parse_capability_link(link: str) -> Tuple[str, str]:
    """Extract ``(id, sig)`` from a capability path or URL; blanks when absent."""
    query = parse_qs(urlsplit(link).query)
    return (query.get("id") or [""])[0], (query.get("sig") or [""])[0]
