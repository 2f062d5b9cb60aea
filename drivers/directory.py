"""
Purpose: Read-only snapshot of the driver directory.
What it does:
Holds the driver records handed to the matcher for a single call.
Snapshots are built by the surrounding app from backend documents, or from a
CSV export (e.g. the mock drivers written by scripts/generate_mock_drivers.py).

Staleness is the caller's problem: a snapshot is never refreshed in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import pandas as pd

from .models import DriverRecord

CSV_COLUMNS = ["driver_id", "is_online", "lat", "lon", "vehicle_type"]


@dataclass(frozen=True)
class DriverDirectory:
    drivers: Tuple[DriverRecord, ...] = ()

    @classmethod
    def of(cls, drivers: Iterable[DriverRecord]) -> DriverDirectory:
        return cls(tuple(drivers))

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> DriverDirectory:
        """
        Builds a snapshot from backend documents. Each record carries its own
        document id under "id" next to the stored fields.
        """
        return cls(tuple(DriverRecord.from_document(record["id"], record) for record in records))

    @classmethod
    def from_csv(cls, path: Union[str, Path]) -> DriverDirectory:
        """
        Loads a tabular snapshot. Required columns: driver_id, is_online, lat, lon.
        Empty lat/lon cells mean "location unknown"; vehicle_type is optional.
        """
        df = pd.read_csv(path, dtype={"driver_id": str})

        missing = [column for column in CSV_COLUMNS[:4] if column not in df.columns]
        if missing:
            raise ValueError(f"Driver snapshot {path} is missing columns: {', '.join(missing)}")

        drivers: List[DriverRecord] = []
        for _, row in df.iterrows():
            has_location = not (pd.isna(row["lat"]) or pd.isna(row["lon"]))
            vehicle_type = row.get("vehicle_type")

            drivers.append(
                DriverRecord.new(
                    driver_id=row["driver_id"],
                    lat=float(row["lat"]) if has_location else None,
                    lon=float(row["lon"]) if has_location else None,
                    is_online=_as_bool(row["is_online"]),
                    vehicle_type=None if pd.isna(vehicle_type) else str(vehicle_type),
                )
            )
        return cls(tuple(drivers))

    def get(self, driver_id: str) -> Optional[DriverRecord]:
        for driver in self.drivers:
            if driver.id == driver_id:
                return driver
        return None

    def online(self) -> List[DriverRecord]:
        return [driver for driver in self.drivers if driver.is_online]

    def to_frame(self) -> pd.DataFrame:
        rows = []
        for driver in self.drivers:
            location = driver.current_location
            rows.append({
                "driver_id": driver.id,
                "is_online": driver.is_online,
                "lat": location.latitude if location else None,
                "lon": location.longitude if location else None,
                "vehicle_type": driver.vehicle_type,
            })
        return pd.DataFrame(rows, columns=CSV_COLUMNS)

    def __iter__(self) -> Iterator[DriverRecord]:
        return iter(self.drivers)

    def __len__(self) -> int:
        return len(self.drivers)


def _as_bool(value: Any) -> bool:
    # an empty cell means the status is unknown, which is not online
    if pd.isna(value):
        return False
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "online")
    return bool(value)
