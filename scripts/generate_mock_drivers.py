import numpy as np
import pandas as pd

# New York, where the sample delivery requests are centred
CENTER_LAT = 40.7128
CENTER_LON = -74.0060

VEHICLE_TYPES = ["bike", "motorcycle", "car", "van"]


def generate_mock_drivers(filename="mock_drivers_100.csv", count=100, seed=None):
    """
    Writes a driver directory snapshot in the CSV shape DriverDirectory.from_csv reads:
    driver_id, is_online, lat, lon, vehicle_type

    About 80% of drivers are online, and about 5% have never shared a location
    (empty lat/lon), so the matcher always has someone to skip.
    """
    rng = np.random.default_rng(seed)

    rows = []
    for i in range(count):
        has_location = rng.random() >= 0.05

        # Scatter drivers around the centre (roughly +/- 8km)
        lat = CENTER_LAT + rng.uniform(-0.075, 0.075) if has_location else None
        lon = CENTER_LON + rng.uniform(-0.075, 0.075) if has_location else None

        rows.append({
            "driver_id": f"DRV-{str(i+1).zfill(3)}",
            "is_online": bool(rng.random() < 0.8),
            "lat": np.round(lat, 6) if has_location else None,
            "lon": np.round(lon, 6) if has_location else None,
            "vehicle_type": rng.choice(VEHICLE_TYPES, p=[0.2, 0.4, 0.3, 0.1]),
        })

    df = pd.DataFrame(rows, columns=["driver_id", "is_online", "lat", "lon", "vehicle_type"])
    df.to_csv(filename, index=False)

    print(f"Successfully generated {count} mock drivers into '{filename}'.")
    return df


if __name__ == "__main__":
    generate_mock_drivers()
