"""GSTIN validation and jurisdiction helpers.

A GSTIN is ``[state code][PAN][entity][Z][checksum]``, 15 characters in
all. Only the grammar and the state code are checked; the trailing check
digit is not recomputed.
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional

from errors import ERROR_KINDS, FormatError, GstError, MissingInput
from states import INDIAN_STATES, StateEntry, get_state

logger = logging.getLogger(__name__)

GSTIN_REGEX = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")

GSTIN_REQUIRED = "GSTIN is required"
GSTIN_BAD_FORMAT = "Invalid GSTIN format. Expected: 22AAAAA0000A1Z5"


@dataclass(frozen=True)
class GstinValidation:
    valid: bool
    state_code: Optional[str] = None
    state_name: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    def raise_for_error(self):
        """Raise the matching ``errors`` exception when invalid."""
        if not self.valid:
            raise ERROR_KINDS[self.error_kind](self.error)
        return self

    def to_dict(self):
        if self.valid:
            return {"valid": True, "stateCode": self.state_code, "stateName": self.state_name}
        return {"valid": False, "error": self.error}


def _invalid(kind, message):
    return GstinValidation(valid=False, error=message, error_kind=kind)


def validate_gstin(gstin) -> GstinValidation:
    if not gstin:
        return _invalid("MissingInput", GSTIN_REQUIRED)

    gstin = str(gstin).upper()
    if not GSTIN_REGEX.match(gstin):
        return _invalid("FormatError", GSTIN_BAD_FORMAT)

    code = gstin[:2]
    entry = get_state(code)
    if entry is None:
        return _invalid("UnknownJurisdiction", f"Invalid state code: {code}")

    return GstinValidation(valid=True, state_code=entry.code, state_name=entry.name)


def state_code_of(gstin) -> Optional[str]:
    """First two characters of ``gstin``, or None when too short."""
    if not gstin or len(gstin) < 2:
        return None
    return gstin[:2]


def state_of(gstin) -> Optional[StateEntry]:
    return get_state(state_code_of(gstin))


def reconcile_registry_state(gstin, raw_state) -> str:
    """Map the state reported by a GSTIN registry onto a known state name.

    The registry may send a name ("PUNJAB") or a code ("03"). Whatever it
    says, the GSTIN prefix decides when it names a known state.
    """
    raw = str(raw_state or "").strip()
    name = ""
    for entry in INDIAN_STATES:
        if entry.name.lower() == raw.lower():
            name = entry.name
            break
    else:
        by_code = get_state(raw)
        if by_code:
            name = by_code.name

    from_gstin = state_of(gstin)
    if from_gstin and name != from_gstin.name:
        if name:
            logger.warning(
                "Registry returned state %s but GSTIN %s indicates %s; using GSTIN",
                name, gstin, from_gstin.name,
            )
        name = from_gstin.name
    return name


@dataclass(frozen=True)
class RegistryTaxpayer:
    legal_name: str
    trade_name: str
    address: str
    state: str
    pincode: str

    def to_dict(self):
        return {
            "legalName": self.legal_name,
            "tradeName": self.trade_name,
            "address": self.address,
            "state": self.state,
            "pincode": self.pincode,
        }


_ADDRESS_PARTS = ("bno", "bnm", "st", "loc", "city", "dst")


def parse_registry_taxpayer(gstin, payload) -> RegistryTaxpayer:
    """Normalize a GSTIN registry response for ``gstin``.

    Raises ``MissingInput``/``FormatError`` for an unusable GSTIN and
    ``GstError`` when the registry reports a failure.
    """
    if not gstin:
        raise MissingInput(GSTIN_REQUIRED)
    if not GSTIN_REGEX.match(gstin):
        raise FormatError("Invalid GSTIN format")
    if not isinstance(payload, dict) or not payload:
        raise GstError("Empty response from GST registry")
    if payload.get("error"):
        raise GstError(payload.get("message") or "Failed to fetch GST details")

    nested = payload.get("data") or {}
    taxpayer = (
        payload.get("taxpayerInfo")
        or payload.get("taxpayer")
        or (nested.get("taxpayer") if isinstance(nested, dict) else None)
        or payload
    )
    addr = (
        (taxpayer.get("pradr") or {}).get("addr")
        or taxpayer.get("address_details")
        or taxpayer.get("address")
        or {}
    )
    if not isinstance(addr, dict):
        addr = {}

    return RegistryTaxpayer(
        legal_name=taxpayer.get("lgnm") or taxpayer.get("tradeName") or "",
        trade_name=taxpayer.get("tradeNam") or "",
        address=", ".join(str(addr[k]) for k in _ADDRESS_PARTS if addr.get(k)),
        state=reconcile_registry_state(gstin, addr.get("stcd")),
        pincode=str(addr.get("pncd") or ""),
    )
