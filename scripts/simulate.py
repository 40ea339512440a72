"""
Order Lifecycle Simulation Script

Drives a running server through the full dish/order lifecycle: seeds a menu,
fires a burst of orders, walks them through the status workflow, deletes
the pending ones and checks that invalid requests are rejected.
Run from project root: python scripts/simulate.py

Author: Khalil_Bannouri
Version: 1.0.0
"""

import asyncio
import sys
import random
import time
import argparse
from datetime import datetime
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:5000"
TOTAL_ORDERS = 50

MENU = [
    {"name": "Pizza Margherita", "description": "Tomato, mozzarella, basil", "price": 14},
    {"name": "Caesar Salad", "description": "Romaine, parmesan, croutons", "price": 9},
    {"name": "Pasta Carbonara", "description": "Egg, pecorino, guanciale", "price": 13},
    {"name": "Tiramisu", "description": "Coffee-soaked ladyfingers", "price": 7},
]
STREETS = ["Main St", "Broadway", "5th Avenue", "Park Ave", "Madison Ave"]
OPEN_STATUSES = ["pending", "preparing", "out-for-delivery"]

# Requests that must be answered with a 400 and leave the stores untouched
INVALID_REQUESTS = [
    ("POST", "/dishes", {"data": {"name": "Soup", "description": "x", "image_url": "u"}}),
    ("POST", "/dishes", {"data": {"name": "Soup", "description": "x", "price": 4.5, "image_url": "u"}}),
    ("POST", "/orders", {"data": {"deliverTo": "A", "mobileNumber": "1", "dishes": []}}),
    ("POST", "/orders", {"data": {"deliverTo": "A", "mobileNumber": "1", "dishes": [{"quantity": 0}]}}),
]


def generate_dish_payload(item: dict[str, Any]) -> dict[str, Any]:
    """Wrap a menu entry as a create-dish request."""
    slug = item["name"].lower().replace(" ", "-")
    return {"data": {**item, "image_url": f"https://images.example.com/{slug}.jpg"}}


def generate_order_payload(dishes: list[dict[str, Any]]) -> dict[str, Any]:
    """Generate a random order for the given menu."""
    lines = [
        {**dish, "quantity": random.randint(1, 3)}
        for dish in random.sample(dishes, k=random.randint(1, len(dishes)))
    ]
    return {
        "data": {
            "deliverTo": f"{random.randint(1, 999)} {random.choice(STREETS)}",
            "mobileNumber": f"555-{random.randint(100, 999)}-{random.randint(1000, 9999)}",
            "dishes": lines,
        }
    }


async def send_order(
    client: httpx.AsyncClient,
    order_num: int,
    dishes: list[dict[str, Any]],
) -> dict[str, Any]:
    """Create one order."""
    start_time = time.time()
    try:
        response = await client.post(
            f"{API_BASE_URL}/orders",
            json=generate_order_payload(dishes),
            timeout=30.0,
        )
        elapsed = round(time.time() - start_time, 3)
        if response.status_code == 201:
            return {
                "order_num": order_num,
                "success": True,
                "order": response.json()["data"],
                "time": elapsed,
            }
        return {
            "order_num": order_num,
            "success": False,
            "error": response.text[:100],
            "time": elapsed,
        }
    except httpx.HTTPError as e:
        elapsed = round(time.time() - start_time, 3)
        return {
            "order_num": order_num,
            "success": False,
            "error": str(e)[:100],
            "time": elapsed,
        }


async def advance_order(client: httpx.AsyncClient, order: dict[str, Any]) -> int:
    """Move an order to a random open status. Returns the HTTP status code."""
    data = {key: order[key] for key in ("deliverTo", "mobileNumber", "dishes")}
    data["status"] = random.choice(OPEN_STATUSES)
    response = await client.put(
        f"{API_BASE_URL}/orders/{order['id']}",
        json={"data": data},
        timeout=30.0,
    )
    if response.status_code == 200:
        order["status"] = response.json()["data"]["status"]
    return response.status_code


# =============================================================================
# MAIN SIMULATION RUNNER
# =============================================================================

async def run_simulation(num_orders: int = TOTAL_ORDERS) -> dict[str, Any]:
    """
    Run the lifecycle simulation.

    Args:
        num_orders: Number of orders to create
    """
    print("=" * 70)
    print("🔥 ORDER LIFECYCLE SIMULATION")
    print("=" * 70)
    print(f"📋 Total Orders: {num_orders}")
    print(f"🎯 Target: {API_BASE_URL}")
    print(f"⏰ Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()

    async with httpx.AsyncClient() as client:
        print("\n🍽️  Creating menu...")
        dishes = []
        for item in MENU:
            response = await client.post(f"{API_BASE_URL}/dishes", json=generate_dish_payload(item))
            response.raise_for_status()
            dishes.append(response.json()["data"])
        print(f"   ✅ {len(dishes)} dishes created")

        print("\n🚀 Firing orders...\n")
        tasks = [send_order(client, i + 1, dishes) for i in range(num_orders)]
        results = await asyncio.gather(*tasks)
        successful = [r for r in results if r["success"]]
        failed = [r for r in results if not r["success"]]

        print("🔄 Advancing order statuses...")
        codes = await asyncio.gather(*(advance_order(client, r["order"]) for r in successful))
        advanced = sum(1 for code in codes if code == 200)

        print("🗑️  Deleting orders...")
        deleted = rejected = 0
        for r in successful:
            order = r["order"]
            response = await client.delete(f"{API_BASE_URL}/orders/{order['id']}")
            if response.status_code == 204:
                deleted += 1
            elif response.status_code == 400 and order["status"] != "pending":
                rejected += 1
            else:
                print(f"   ⚠️ Unexpected {response.status_code} deleting {order['id']}")

        print("🧪 Sending invalid requests...")
        invalid_ok = 0
        for method, path, body in INVALID_REQUESTS:
            response = await client.request(method, f"{API_BASE_URL}{path}", json=body)
            if response.status_code == 400:
                invalid_ok += 1
            else:
                print(f"   ⚠️ {method} {path} answered {response.status_code}")

    total_time = round(time.time() - start_time, 2)

    print("\n" + "=" * 70)
    print("📊 SIMULATION RESULTS")
    print("=" * 70)
    print(f"\n✅ Created Orders: {len(successful)}/{num_orders}")
    print(f"❌ Failed Orders: {len(failed)}/{num_orders}")
    print(f"🔄 Status Updates Accepted: {advanced}/{len(successful)}")
    print(f"🗑️  Deleted (pending): {deleted}")
    print(f"🚫 Delete Rejected (not pending): {rejected}")
    print(f"🧪 Invalid Requests Rejected: {invalid_ok}/{len(INVALID_REQUESTS)}")
    print(f"⏱️  Total Time: {total_time}s")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        print(f"\n📈 Average Create Response: {avg_time}s")

    if failed:
        print("\n⚠️  Failed Order Details (showing first 5):")
        for f in failed[:5]:
            print(f"   Order #{f['order_num']}: {f.get('error', 'Unknown error')}")

    print("=" * 70)

    return {
        "total": num_orders,
        "successful": len(successful),
        "failed": len(failed),
        "deleted": deleted,
        "total_time": total_time,
    }


async def check_health() -> bool:
    """Pre-flight check before the simulation."""
    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(f"{API_BASE_URL}/health")
        except httpx.HTTPError as e:
            print(f"   ❌ Server unreachable: {e}")
            return False
        if response.status_code != 200:
            print(f"   ❌ Failed: {response.text}")
            return False
        data = response.json()
        print(f"   ✅ Status: {data.get('status')}")
        print(f"   Dishes: {data.get('dishes')}  Orders: {data.get('orders')}")
        return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Order Lifecycle Simulation")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Number of orders")
    parser.add_argument("--url", default=API_BASE_URL, help="API base URL")
    args = parser.parse_args()

    API_BASE_URL = args.url.rstrip("/")

    print("\n1️⃣ Health Check...")
    if not asyncio.run(check_health()):
        print("\n❌ Pre-flight check failed. Start the server first.")
        sys.exit(1)

    asyncio.run(run_simulation(args.orders))
