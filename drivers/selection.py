"""
Purpose: Business rules and distance math for choosing the best driver for a pickup.
What it does:
Accepts a pickup point and a snapshot of drivers, filters out ineligible
drivers, and picks the closest one (or honours the customer's preferred
driver when that driver can take the job).
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from geo import Coordinate, distance_km
from .models import DriverRecord
from .policy import MatchingPolicy, default_matching_policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """
    The selected driver plus its distance to the pickup, in km (unrounded).
    "No match" is represented by None, never by an empty MatchResult.
    """
    driver: DriverRecord
    distance_km: float

    @property
    def driver_id(self) -> str:
        return self.driver.id


def filter_eligible_drivers(
    drivers: Iterable[DriverRecord],
    vehicle_type: Optional[str] = None,
) -> List[DriverRecord]:
    """
    Returns only drivers who are online, have a known location and, if a
    vehicle type is requested, drive that type of vehicle.
    Input order is preserved.
    """
    eligible = []

    for driver in drivers:
        if not driver.is_dispatchable:
            continue

        if vehicle_type is not None and driver.vehicle_type != vehicle_type:
            continue

        eligible.append(driver)

    return eligible


def _find_preferred(
    pickup: Coordinate,
    candidates: List[DriverRecord],
    preferred_id: str,
) -> Optional[MatchResult]:
    for driver in candidates:
        if driver.id != preferred_id:
            continue
        if driver.is_dispatchable:
            return MatchResult(driver, distance_km(pickup, driver.current_location))
        logger.info(f"Preferred driver {preferred_id} is offline or has no location, falling back to nearest search")
        return None

    logger.info(f"Preferred driver {preferred_id} is not in the snapshot, falling back to nearest search")
    return None


def rank_drivers(
    pickup: Coordinate,
    candidates: Iterable[DriverRecord],
    *,
    vehicle_type: Optional[str] = None,
    policy: Optional[MatchingPolicy] = None,
) -> List[MatchResult]:
    """
    Every eligible driver with its distance to the pickup, closest first.
    Equal distances keep snapshot order unless the policy asks for driver id order.
    """
    policy = policy or default_matching_policy()
    pickup.validate()

    ranked = [
        MatchResult(driver, distance_km(pickup, driver.current_location))
        for driver in filter_eligible_drivers(candidates, vehicle_type)
    ]

    if policy.max_pickup_distance_km is not None:
        ranked = [result for result in ranked if result.distance_km <= policy.max_pickup_distance_km]

    # list.sort is stable, so ties stay in snapshot order
    if policy.tie_break_by_driver_id:
        ranked.sort(key=lambda result: (result.distance_km, result.driver.id))
    else:
        ranked.sort(key=lambda result: result.distance_km)

    return ranked


def select_driver(
    pickup: Coordinate,
    candidates: Iterable[DriverRecord],
    preferred_id: Optional[str] = None,
    *,
    vehicle_type: Optional[str] = None,
    policy: Optional[MatchingPolicy] = None,
) -> Optional[MatchResult]:
    """
    Pick the driver for a pickup.

    1. A preferred driver who is online and located wins outright,
       regardless of how far away they are.
    2. Otherwise the closest online, located driver wins.
       Ties go to the first one in the snapshot (or the lowest id, if the policy says so).
    3. No eligible driver -> None.

    Raises InvalidCoordinate for an out-of-range pickup or driver location.
    """
    policy = policy or default_matching_policy()
    pickup.validate()

    candidates = list(candidates)

    if preferred_id:
        preferred = _find_preferred(pickup, candidates, preferred_id)
        if preferred is not None:
            logger.info(f"Matched preferred driver {preferred.driver_id} at {preferred.distance_km:.2f} km")
            return preferred

    best: Optional[MatchResult] = None

    for driver in filter_eligible_drivers(candidates, vehicle_type):
        driver_distance = distance_km(pickup, driver.current_location)

        if policy.max_pickup_distance_km is not None and driver_distance > policy.max_pickup_distance_km:
            continue

        if best is None or driver_distance < best.distance_km:
            best = MatchResult(driver, driver_distance)
        elif (
            policy.tie_break_by_driver_id
            and driver_distance == best.distance_km
            and driver.id < best.driver.id
        ):
            best = MatchResult(driver, driver_distance)

    if best is None:
        logger.info(f"No eligible driver among {len(candidates)} candidates")
        return None

    logger.info(f"Matched nearest driver {best.driver_id} at {best.distance_km:.2f} km")
    return best
