"""
Suburb Gazetteer

Read-only lookup of known suburbs with coordinates. The default dataset is
the bundled Australian suburb list; an alternative can be loaded from CSV.
"""
from typing import Iterable, List, Optional

import pandas as pd

from src.realestate_directory.geo.au_suburbs import AU_SUBURBS
from src.realestate_directory.models.location import SuburbRecord
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)

CSV_COLUMNS = ["suburb", "postcode", "state", "latitude", "longitude"]


class SuburbGazetteer:
    """
    Immutable collection of SuburbRecord in dataset order.

    Name lookups are case-insensitive; postcode lookups are exact string
    matches. When several records match, the earliest in dataset order wins,
    and a suburb-name match always beats a postcode match.
    """

    def __init__(self, records: Iterable[SuburbRecord]):
        self._records = tuple(records)

    @classmethod
    def default(cls) -> "SuburbGazetteer":
        """Gazetteer over the bundled Australian suburb list."""
        return cls(
            SuburbRecord(suburb=suburb, postcode=postcode, state=state, latitude=lat, longitude=lng)
            for suburb, postcode, state, lat, lng in AU_SUBURBS
        )

    @classmethod
    def from_csv(cls, csv_path: str) -> "SuburbGazetteer":
        """
        Load a gazetteer from CSV.

        Expected columns: suburb, postcode, state, latitude, longitude.
        Coordinates may be blank. Rows without a suburb name are dropped.

        Args:
            csv_path: Path to the CSV file

        Returns:
            SuburbGazetteer preserving file row order
        """
        logger.info("loading_suburb_csv", csv_path=csv_path)

        df = pd.read_csv(csv_path, dtype={"postcode": str, "state": str})

        missing = [column for column in CSV_COLUMNS[:3] if column not in df.columns]
        if missing:
            raise ValueError(f"Suburb CSV missing columns: {missing}")

        original_count = len(df)
        df = df[df["suburb"].notna() & (df["suburb"].astype(str).str.strip() != "")]

        records = []
        for row in df.to_dict(orient="records"):
            records.append(
                SuburbRecord(
                    suburb=str(row["suburb"]),
                    postcode=row["postcode"],
                    state=str(row["state"]).strip().upper(),
                    latitude=_coordinate(row.get("latitude")),
                    longitude=_coordinate(row.get("longitude")),
                )
            )

        logger.info(
            "suburb_csv_loaded",
            original_count=original_count,
            filtered_out=original_count - len(records),
            remaining=len(records),
        )

        return cls(records)

    @property
    def records(self) -> tuple:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def list_by_state(self, state: Optional[str] = None) -> List[SuburbRecord]:
        """
        List suburbs, optionally restricted to one state.

        Args:
            state: State code (e.g. "NSW"); empty or None returns every record

        Returns:
            Matching records in dataset order
        """
        if not state:
            return list(self._records)

        code = getattr(state, "value", state).strip().upper()
        return [record for record in self._records if record.state.value == code]

    def find_by_suburb_or_postcode(self, text: Optional[str]) -> Optional[SuburbRecord]:
        """
        Resolve a suburb name or postcode to a gazetteer record.

        Args:
            text: Suburb name (any case) or 4-digit postcode

        Returns:
            First matching record, or None
        """
        if not text or not text.strip():
            return None

        query = text.strip()
        lowered = query.lower()

        for record in self._records:
            if record.suburb.lower() == lowered:
                return record

        for record in self._records:
            if record.postcode == query:
                return record

        logger.debug("suburb_not_found", query=query[:50])
        return None


def _coordinate(value) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return float(value)
