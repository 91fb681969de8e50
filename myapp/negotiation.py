"""Content negotiation for the root endpoint.

The root page has two representations, offered in this order:

- `text/html`, only when a landing template was loaded at startup
- `application/json`, always

Each offer is scored against the client's `Accept` ranges. An offer takes its
most specific matching range (ties go to the higher `q`), then offers are
ranked by `q`, specificity, position of the matching range in the header and
finally offer order. A range with `q=0` rejects the offer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

HTML = "text/html"
JSON = "application/json"

OFFERS: Tuple[str, ...] = (HTML, JSON)


@dataclass(frozen=True)
class MediaRange:
    type: str
    subtype: str
    q: float = 1.0
    index: int = 0
    params: Dict[str, str] = field(default_factory=dict)


def parse_accept(header: Optional[str]) -> Optional[List[MediaRange]]:
    """Parse an `Accept` header; None means absent or empty, i.e. accept anything."""
    if header is None or not header.strip():
        return None

    ranges: List[MediaRange] = []
    for index, raw in enumerate(header.split(",")):
        parts = [part.strip() for part in raw.split(";")]
        media = parts[0].lower()
        if "/" not in media:
            continue
        type_, subtype = (piece.strip() for piece in media.split("/", 1))
        if not type_ or not subtype:
            continue

        q = 1.0
        params: Dict[str, str] = {}
        valid = True
        for param in parts[1:]:
            if "=" not in param:
                continue
            key, value = (piece.strip() for piece in param.split("=", 1))
            key = key.lower()
            value = value.strip('"')
            if key == "q":
                try:
                    q = float(value)
                except ValueError:
                    valid = False
                    break
            else:
                params[key] = value.lower()
        if not valid:
            continue

        ranges.append(MediaRange(type_, subtype, max(0.0, min(q, 1.0)), index, params))
    return ranges


def _specificity(offer: str, media_range: MediaRange) -> Optional[int]:
    offer_type, offer_subtype = offer.split("/", 1)
    score = 0
    if media_range.type == offer_type:
        score |= 4
    elif media_range.type != "*":
        return None
    if media_range.subtype == offer_subtype:
        score |= 2
    elif media_range.subtype != "*":
        return None
    # range parameters (charset, level) are ignored: offers carry none
    return score


def _priority(offer: str, accepted: Sequence[MediaRange]) -> Optional[Tuple[float, int, int]]:
    best: Optional[Tuple[int, float, int]] = None
    for media_range in accepted:
        score = _specificity(offer, media_range)
        if score is None:
            continue
        candidate = (score, media_range.q, media_range.index)
        if best is None or candidate[:2] > best[:2]:
            best = candidate
    if best is None:
        return None
    specificity, q, index = best
    return q, specificity, index


def negotiate(accepted: Optional[Sequence[MediaRange]], html_available: bool) -> str:
    """Pick the representation for `/`: HTML or JSON."""
    offers = [offer for offer in OFFERS if offer != HTML or html_available]
    if accepted is None:
        return offers[0]

    ranked = []
    for offer_index, offer in enumerate(offers):
        priority = _priority(offer, accepted)
        if priority is None or priority[0] <= 0:
            continue
        q, specificity, index = priority
        ranked.append(((-q, -specificity, index, offer_index), offer))

    if not ranked:
        return JSON
    ranked.sort()
    return ranked[0][1]
