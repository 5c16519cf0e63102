"""Jurisdiction table: GST state codes and the states/UTs they stand for."""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional


@dataclass(frozen=True)
class StateEntry:
    code: str
    name: str

    def to_dict(self):
        return {"code": self.code, "name": self.name}


INDIAN_STATES = tuple(StateEntry(code, name) for code, name in (
    ("01", "Jammu & Kashmir"),
    ("02", "Himachal Pradesh"),
    ("03", "Punjab"),
    ("04", "Chandigarh"),
    ("05", "Uttarakhand"),
    ("06", "Haryana"),
    ("07", "Delhi"),
    ("08", "Rajasthan"),
    ("09", "Uttar Pradesh"),
    ("10", "Bihar"),
    ("11", "Sikkim"),
    ("12", "Arunachal Pradesh"),
    ("13", "Nagaland"),
    ("14", "Manipur"),
    ("15", "Mizoram"),
    ("16", "Tripura"),
    ("17", "Meghalaya"),
    ("18", "Assam"),
    ("19", "West Bengal"),
    ("20", "Jharkhand"),
    ("21", "Odisha"),
    ("22", "Chhattisgarh"),
    ("23", "Madhya Pradesh"),
    ("24", "Gujarat"),
    ("26", "Dadra & Nagar Haveli and Daman & Diu"),
    ("27", "Maharashtra"),
    ("28", "Andhra Pradesh (Old)"),
    ("29", "Karnataka"),
    ("30", "Goa"),
    ("31", "Lakshadweep"),
    ("32", "Kerala"),
    ("33", "Tamil Nadu"),
    ("34", "Puducherry"),
    ("35", "Andaman & Nicobar Islands"),
    ("36", "Telangana"),
    ("37", "Andhra Pradesh"),
    ("38", "Ladakh"),
    ("97", "Other Territory"),
))

_BY_CODE = MappingProxyType({s.code: s for s in INDIAN_STATES})
_BY_NAME = MappingProxyType({s.name.lower(): s for s in INDIAN_STATES})


def get_state(code) -> Optional[StateEntry]:
    if not code:
        return None
    return _BY_CODE.get(str(code).strip())


def state_name(code) -> Optional[str]:
    entry = get_state(code)
    return entry.name if entry else None


def state_code(name) -> Optional[str]:
    """Case-insensitive exact match on the state name."""
    if not name:
        return None
    entry = _BY_NAME.get(str(name).strip().lower())
    return entry.code if entry else None
