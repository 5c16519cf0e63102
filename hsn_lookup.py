import logging
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd # type: ignore
from rapidfuzz import process, fuzz # type: ignore

import config

logger = logging.getLogger(__name__)

GST_RATES = (0, 5, 12, 18, 28)


@dataclass(frozen=True)
class HsnEntry:
    code: str
    description: str
    type: str
    default_rate: int


COMMON_HSN_SAC = tuple(HsnEntry(*row) for row in (
    ("998311", "Management consulting", "service", 18),
    ("998312", "Business consulting", "service", 18),
    ("998313", "IT consulting", "service", 18),
    ("998314", "IT design & development", "service", 18),
    ("998315", "Hosting & IT infrastructure", "service", 18),
    ("998316", "IT support services", "service", 18),
    ("998361", "Graphic design services", "service", 18),
    ("998362", "Photography services", "service", 18),
    ("998363", "Video production", "service", 18),
    ("998364", "Content writing", "service", 18),
    ("998365", "Translation services", "service", 18),
    ("998371", "Advertising services", "service", 18),
    ("998391", "Accounting & audit", "service", 18),
    ("998392", "Tax preparation", "service", 18),
    ("998393", "Legal services", "service", 18),
    ("997212", "Renting of residential", "service", 0),
    ("997213", "Renting of commercial", "service", 18),
    ("4901", "Printed books", "goods", 0),
    ("8471", "Computers", "goods", 18),
    ("8517", "Mobile phones", "goods", 12),
    ("9403", "Furniture", "goods", 18),
    ("6109", "T-shirts", "goods", 5),
))


class HSNLookup:
    def __init__(self, csv_path: Optional[str] = None):
        """
        Load the HSN/SAC catalog.
        Without a CSV the built-in COMMON_HSN_SAC table is used. A CSV must
        have hsn_code (or hsn), description and rate columns; type is optional.
        """
        csv_path = csv_path if csv_path is not None else config.HSN_CSV_PATH
        if csv_path:
            df = pd.read_csv(csv_path, dtype=str)
            logger.info("Loaded %d HSN rows from %s", len(df), csv_path)
        else:
            df = pd.DataFrame([
                {"hsn_code": e.code, "description": e.description, "type": e.type, "rate": e.default_rate}
                for e in COMMON_HSN_SAC
            ])

        # normalize columns (case-insensitive)
        df.columns = [c.strip().lower() for c in df.columns]
        if "hsn" in df.columns and "hsn_code" not in df.columns:
            df = df.rename(columns={"hsn": "hsn_code"})
        if "hsn_code" not in df.columns:
            raise ValueError("CSV must have an hsn_code column")
        if "description" not in df.columns:
            raise ValueError("CSV must have a Description column")
        if "rate" not in df.columns:
            raise ValueError("CSV must have a Rate column")
        if "type" not in df.columns:
            df["type"] = ""

        df["type"] = df["type"].fillna("").astype(str)
        df["rate"] = pd.to_numeric(df["rate"], errors="coerce").fillna(0)

        df["hsn_code"] = df["hsn_code"].astype(str).str.strip()
        df["description"] = df["description"].fillna("").astype(str)
        self.df = df.reset_index(drop=True)

    def _entry(self, row) -> HsnEntry:
        return HsnEntry(
            code=row["hsn_code"],
            description=row["description"],
            type=row["type"],
            default_rate=int(row["rate"]),
        )

    def search(self, query: str) -> List[HsnEntry]:
        """Case-insensitive substring match on code or description."""
        if not query:
            return []
        q = query.lower()
        mask = (
            self.df["hsn_code"].str.contains(q, regex=False)
            | self.df["description"].str.lower().str.contains(q, regex=False)
        )
        return [self._entry(row) for _, row in self.df[mask].iterrows()]

    def suggest(self, description: str, limit: int = 1):
        """Suggest closest HSN codes for an item description."""
        if not description:
            return []
        choices = self.df["description"].tolist()
        matches = process.extract(description, choices, scorer=fuzz.WRatio, limit=limit)
        results = []
        for match, score, idx in matches:
            results.append({"entry": self._entry(self.df.iloc[idx]), "score": score})
        return results

    def default_rate(self, code: str) -> Optional[int]:
        hits = self.df[self.df["hsn_code"] == str(code).strip()]
        if hits.empty:
            return None
        return int(hits.iloc[0]["rate"])
