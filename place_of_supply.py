import logging
from dataclasses import dataclass
from typing import Optional

from gstin import state_code_of
from states import state_name

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class PlaceOfSupplyResult:
    is_intra_state: bool
    place_of_supply: str
    place_of_supply_code: Optional[str]
    business_state_name: Optional[str]
    client_state_name: Optional[str]

    def to_dict(self):
        return {
            "isIntraState": self.is_intra_state,
            "placeOfSupply": self.place_of_supply,
            "placeOfSupplyCode": self.place_of_supply_code,
            "businessStateName": self.business_state_name,
            "clientStateName": self.client_state_name,
        }


def is_intra_state(business_state, client_state) -> bool:
    """Compare free-text state names. Missing data counts as intra-state."""
    if not business_state or not client_state:
        return True
    return str(business_state).lower() == str(client_state).lower()


def get_place_of_supply(business_gstin=None, client_gstin=None,
                        business_state=None, client_state=None) -> PlaceOfSupplyResult:
    """
    Decide intra- vs inter-state supply for one invoice.
    GSTIN prefixes win when both parties have one (valid or not);
    otherwise the state names are compared.
    """
    business_code = state_code_of(business_gstin)
    client_code = state_code_of(client_gstin)

    if business_code and client_code:
        client_name = state_name(client_code) or client_state or UNKNOWN
        result = PlaceOfSupplyResult(
            is_intra_state=business_code == client_code,
            place_of_supply=client_name,
            place_of_supply_code=client_code,
            business_state_name=state_name(business_code) or business_state or UNKNOWN,
            client_state_name=client_name,
        )
        logger.debug("place of supply from GSTINs %s -> %s: intra=%s",
                     business_code, client_code, result.is_intra_state)
        return result

    intra = is_intra_state(business_state, client_state)
    logger.debug("place of supply from state names %r -> %r: intra=%s",
                 business_state, client_state, intra)
    return PlaceOfSupplyResult(
        is_intra_state=intra,
        place_of_supply=client_state or UNKNOWN,
        place_of_supply_code=None,
        business_state_name=business_state,
        client_state_name=client_state,
    )
