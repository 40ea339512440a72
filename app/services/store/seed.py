"""
Sample Data

Loaded into the stores at startup when ``SEED_DATA=true``. The ids are fixed
so that the sample orders can reference the sample dishes.
"""

from typing import List

from app.models import Dish, Order, OrderStatus

SAMPLE_DISHES = [
    {
        "id": "3c637d011d844ebab1205fef8a7e36ea",
        "name": "Century Eggs",
        "description": "Whole eggs preserved in clay and ash for a few months",
        "image_url": "https://images.pexels.com/photos/6896379/pexels-photo-6896379.jpeg",
        "price": 17,
    },
    {
        "id": "d351db2b49b69679504652ea1cf38241",
        "name": "Dolcelatte and fig crostini",
        "description": "Crispy Italian bread topped with gorgonzola and fig",
        "image_url": "https://images.pexels.com/photos/4109998/pexels-photo-4109998.jpeg",
        "price": 19,
    },
    {
        "id": "90c3d873684bf381dfab29034b5bba73",
        "name": "Falafel and tahini bagel",
        "description": "A warm bagel filled with falafel and tahini",
        "image_url": "https://images.pexels.com/photos/4560606/pexels-photo-4560606.jpeg",
        "price": 6,
    },
]

SAMPLE_ORDERS = [
    {
        "id": "f6069a542257054114138301947672ba",
        "deliverTo": "1600 Pennsylvania Avenue NW, Washington, DC 20500",
        "mobileNumber": "(202) 456-1111",
        "status": OrderStatus.OUT_FOR_DELIVERY,
        "dishes": [dict(SAMPLE_DISHES[2], quantity=1)],
    },
    {
        "id": "5a887d326e83d3c5bdcbee398ea32aff",
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": OrderStatus.DELIVERED,
        "dishes": [dict(SAMPLE_DISHES[0], quantity=2)],
    },
    {
        "id": "a5c6b3d2e1f04a7b8c9d0e1f2a3b4c5d",
        "deliverTo": "221B Baker Street, London",
        "mobileNumber": "(020) 7224-3688",
        "status": OrderStatus.PENDING,
        "dishes": [dict(SAMPLE_DISHES[1], quantity=3)],
    },
]


def sample_dishes() -> List[Dish]:
    """Fresh copies of the sample dishes."""
    return [Dish(**raw) for raw in SAMPLE_DISHES]


def sample_orders() -> List[Order]:
    """Fresh copies of the sample orders."""
    return [
        Order(**{**raw, "dishes": Order.line_items(raw["dishes"])})
        for raw in SAMPLE_ORDERS
    ]
