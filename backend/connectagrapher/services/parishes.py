from __future__ import annotations

import re
from typing import Dict, Optional

from .pricing_catalog import ParishGroup

_NEAR = ("manchester", "st elizabeth")
_RESORT_CORRIDOR = (
    "montego bay",
    "negril",
    "ocho rios",
    "st james",
    "hanover",
    "westmoreland",
    "st ann",
)
_OTHER = (
    "kingston",
    "st andrew",
    "st catherine",
    "clarendon",
    "st thomas",
    "portland",
    "st mary",
    "trelawny",
)


def _normalize(value: str) -> str:
    text = re.sub(r"[^a-z0-9]+", " ", value.lower()).strip()
    text = re.sub(r"\bsaint\b", "st", text)
    return re.sub(r"\s+", " ", text)


_LOOKUP: Dict[str, ParishGroup] = {}
for _names, _group in ((_NEAR, ParishGroup.NEAR), (_RESORT_CORRIDOR, ParishGroup.RESORT_CORRIDOR), (_OTHER, ParishGroup.OTHER)):
    for _name in _names:
        _LOOKUP[_normalize(_name)] = _group
for _group in ParishGroup:
    _LOOKUP[_normalize(_group.value)] = _group


def resolve_parish_group(value: Optional[str]) -> Optional[ParishGroup]:
    """Map a group slug, parish name or resort town to its fee band.

    ``"St. Elizabeth"``, ``"saint elizabeth"`` and ``"manchester-stelizabeth"``
    all resolve to :attr:`ParishGroup.NEAR`. Returns ``None`` for anything
    unrecognised.
    """
    if not value or not isinstance(value, str):
        return None
    return _LOOKUP.get(_normalize(value))
