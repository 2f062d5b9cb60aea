import csv
import os
from typing import List

import pandas as pd

from dispatch.dispatcher import Dispatcher
from drivers.directory import DriverDirectory
from orders.models import Address, DeliveryOrder


class MockPushService:
    def __init__(self):
        self.sent = []

    def notify_new_order(self, driver, order):
        self.sent.append((driver.id, order.id))


def load_requests(dispatcher: Dispatcher, filepath: str, limit: int = 50) -> List[DeliveryOrder]:
    df = pd.read_csv(filepath, keep_default_na=False).head(limit)

    orders = []
    for _, row in df.iterrows():
        orders.append(
            dispatcher.create_order(
                customer_id=str(row["customer_id"]),
                pickup=Address.new(row["pickup_address"], row["pickup_lat"], row["pickup_lon"]),
                dropoff=Address.new(row["dropoff_address"], row["dropoff_lat"], row["dropoff_lon"]),
                delivery_type=row["delivery_type"],
                vehicle_type=row["vehicle_type"] or None,
            )
        )
    return orders


def run_simulation(requests_path="raw_requests_generated.csv",
                   drivers_path="mock_drivers_100.csv",
                   output_path="matching_results.csv",
                   limit=50):
    print("=== STARTING END-TO-END MATCHING SIMULATION ===")

    push_service = MockPushService()
    dispatcher = Dispatcher(push_service=push_service)

    # 1. Load Data
    directory = DriverDirectory.from_csv(drivers_path)
    orders = load_requests(dispatcher, requests_path, limit=limit)
    print(f"Loaded {len(orders)} Orders and {len(directory)} Drivers ({len(directory.online())} online).\n")

    # 2. Assign every order against the same snapshot
    matched = 0
    with open(output_path, "w", newline="") as file:
        writer = csv.writer(file)
        writer.writerow(["order_id", "delivery_type", "distance_km", "price", "driver_id", "distance_to_pickup_km", "status_message"])

        for order in orders:
            outcome = dispatcher.assign_driver(order, directory)

            if outcome.matched:
                matched += 1
                writer.writerow([order.id, order.delivery_type, order.distance_km, order.price,
                                 outcome.match.driver_id, round(outcome.match.distance_km, 2), ""])
                print(f"[MATCHED] {order.id[:8]} -> {outcome.match.driver_id} ({outcome.match.distance_km:.2f} km away)")
            else:
                writer.writerow([order.id, order.delivery_type, order.distance_km, order.price,
                                 "", "", order.status_message])
                print(f"[UNMATCHED] {order.id[:8]} -> {order.status_message}")

    print("\n=== SIMULATION COMPLETE ===")
    print(f"Orders Matched: {matched} / {len(orders)}")
    print(f"Notifications sent: {len(push_service.sent)}")
    print(f"Results written to '{os.path.basename(output_path)}'.")
    return matched


if __name__ == "__main__":
    run_simulation()
