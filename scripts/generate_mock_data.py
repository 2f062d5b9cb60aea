import uuid

import numpy as np
import pandas as pd

from scripts.generate_mock_drivers import CENTER_LAT, CENTER_LON


def generate_mock_requests(num_requests=200, num_merchants=20, output_file="raw_requests_generated.csv", seed=None):
    """
    Generates delivery requests for the matching simulation.
    Pickups come from a fixed set of merchants so several requests share a
    pickup point; dropoffs are scattered a few km around each merchant.
    """
    rng = np.random.default_rng(seed)

    # 1. Fixed merchants (pickups) within ~5km of the centre
    merchants = []
    for merchant_index in range(num_merchants):
        merchants.append({
            "id": f"m_{str(uuid.uuid4())[:8]}",
            "name": f"Merchant {merchant_index+1}",
            "lat": CENTER_LAT + rng.uniform(-0.05, 0.05),
            "lon": CENTER_LON + rng.uniform(-0.05, 0.05),
        })

    data = []

    # 2. Generate requests
    for request_index in range(num_requests):
        merchant = merchants[rng.integers(0, num_merchants)]

        # Dropoff within ~0-9km of the merchant
        dropoff_lat = merchant["lat"] + rng.uniform(-0.08, 0.08)
        dropoff_lon = merchant["lon"] + rng.uniform(-0.08, 0.08)

        data.append({
            "request_id": f"r_{str(request_index+1).zfill(6)}",
            "customer_id": f"c_{rng.integers(1000, 9999)}",
            "pickup_address": merchant["name"],
            "pickup_lat": np.round(merchant["lat"], 6),
            "pickup_lon": np.round(merchant["lon"], 6),
            "dropoff_address": f"Customer {request_index+1}",
            "dropoff_lat": np.round(dropoff_lat, 6),
            "dropoff_lon": np.round(dropoff_lon, 6),
            "delivery_type": rng.choice(["standard", "urgent"], p=[0.8, 0.2]),
            "vehicle_type": rng.choice(["", "motorcycle", "car"], p=[0.7, 0.2, 0.1]),
        })

    # 3. Save to CSV
    df = pd.DataFrame(data)
    df.to_csv(output_file, index=False)
    print(f"Successfully generated {num_requests} delivery requests into '{output_file}'.")
    return df


if __name__ == "__main__":
    generate_mock_requests()
