"""
Share token encoding.

A token is ``<payload>.<fingerprint>``:

- payload: URL-safe base64 (padding stripped) of the canonical JSON form of
  the answers, e.g. ``{"0":"yes","1":"no",...}`` with keys in position order
- fingerprint: ``catalog_fingerprint()`` of the catalog the answers refer to

Tokens without a fingerprint are legacy links (plain base64 of the same
JSON). They are accepted when ``accept_legacy`` is set.
"""
from __future__ import annotations

import base64
import binascii
import json
from typing import Any, List, Mapping, Optional, Sequence
from urllib.parse import parse_qs, urlsplit

from core.catalog import QUESTIONS, Question, catalog_fingerprint
from core.exceptions import CatalogMismatchError, IncompleteAnswersError, MalformedTokenError
from core.logging_config import get_logger
from core.types import AnswerSet, Response
from core.utils import parse_answer_key

LOGGER = get_logger(__name__)

FINGERPRINT_SEPARATOR = "."

_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def canonical_value(value: Any) -> str:
    return value.value if isinstance(value, Response) else str(value)


def canonical_form(answers: Mapping[int, Any]) -> str:
    """Compact JSON with keys in ascending position order."""
    ordered = {str(position): canonical_value(answers[position]) for position in sorted(answers)}
    return json.dumps(ordered, separators=(",", ":"), ensure_ascii=False)


def encode(answers: Mapping[int, Any], catalog: Sequence[Question] = QUESTIONS) -> str:
    """
    Encode a complete answer set into a share token.

    Raises:
        IncompleteAnswersError: If any catalog position is missing or a
            foreign position is present.
    """
    expected = set(range(len(catalog)))
    if set(answers) != expected:
        raise IncompleteAnswersError(len(expected & set(answers)), len(catalog))

    payload = base64.urlsafe_b64encode(canonical_form(answers).encode("utf-8"))
    return f"{payload.decode('ascii').rstrip('=')}{FINGERPRINT_SEPARATOR}{catalog_fingerprint(catalog)}"


def _b64decode(payload: str) -> bytes:
    normalized = payload.translate(_URLSAFE_TO_STANDARD)
    normalized += "=" * (-len(normalized) % 4)
    try:
        return base64.b64decode(normalized, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedTokenError(f"Token is not valid base64: {exc}") from exc


def _parse(text: str) -> AnswerSet:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise MalformedTokenError(f"Token payload is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedTokenError(f"Token payload is a {type(data).__name__}, expected an object")

    answers: AnswerSet = {}
    unknown: List[int] = []
    for key, value in data.items():
        try:
            position = parse_answer_key(key)
        except ValueError as exc:
            raise MalformedTokenError(f"Token key {key!r} is not a question position") from exc
        if not isinstance(value, str):
            raise MalformedTokenError(f"Token value for {key!r} is not a response")
        try:
            answers[position] = Response(value)
        except ValueError:
            answers[position] = value
            unknown.append(position)

    if unknown:
        LOGGER.warning(
            "Share token carries unrecognised responses",
            extra={"extra_data": {"positions": unknown}},
        )
    return answers


def decode(
    token: str,
    catalog: Sequence[Question] = QUESTIONS,
    accept_legacy: bool = True,
) -> AnswerSet:
    """
    Decode a share token back into an answer set.

    Missing or extra positions are accepted as-is; callers gate display on
    completeness.

    Args:
        token: Token, optionally with a leading ``#``.
        catalog: Catalog the token must have been produced against.
        accept_legacy: Accept tokens that carry no catalog fingerprint.

    Returns:
        Mapping of position to response.

    Raises:
        MalformedTokenError: If the token cannot be decoded into a
            position -> response mapping.
        CatalogMismatchError: If the token belongs to another catalog.
    """
    token = (token or "").strip().lstrip("#")
    if not token:
        raise MalformedTokenError("Share token is empty")

    payload, separator, fingerprint = token.rpartition(FINGERPRINT_SEPARATOR)
    if not separator:
        payload, fingerprint = token, ""

    expected = catalog_fingerprint(catalog)
    if fingerprint:
        if fingerprint != expected:
            raise CatalogMismatchError(expected, fingerprint)
    elif not accept_legacy:
        raise CatalogMismatchError(expected, "")
    else:
        LOGGER.warning("Decoding legacy share token without catalog fingerprint")

    raw = _b64decode(payload)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedTokenError("Token payload is not UTF-8 text") from exc

    return _parse(text)


def extract_token(link: str, query_param: str = "r") -> Optional[str]:
    """
    Pull a token out of a shared link.

    Accepts a full URL with the token in its fragment or in ``query_param``,
    or a bare token. Returns None when nothing token-like is present.
    """
    link = (link or "").strip()
    if not link:
        return None
    if "://" not in link and not link.startswith(("/", "?")):
        return link.lstrip("#") or None

    parts = urlsplit(link)
    if parts.fragment:
        return parts.fragment
    values = parse_qs(parts.query).get(query_param)
    return values[0] if values else None


__all__ = ["encode", "decode", "canonical_form", "canonical_value", "extract_token", "FINGERPRINT_SEPARATOR"]
