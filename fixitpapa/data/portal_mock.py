"""
Demo data for the customer portal.

Nothing here is persisted. Routes only talk to MockPortalRepository through its
async methods so a real store-backed repository can replace it without
touching the handlers or templates.
"""
from dataclasses import dataclass, field
from typing import List, Optional


APPOINTMENT_STATUSES = ("scheduled", "in-progress", "completed", "cancelled")
PAYMENT_STATUSES = ("paid", "pending", "refunded")


@dataclass(frozen=True)
class Customer:
    id: str
    email: str
    name: str
    phone: str
    address: str
    created_at: str
    avatar: Optional[str] = None


@dataclass(frozen=True)
class Appointment:
    id: str
    service_id: str
    service_name: str
    date: str
    time: str
    status: str
    technician: str
    estimated_duration: str
    price: float
    notes: Optional[str] = None


@dataclass(frozen=True)
class ServiceHistoryItem:
    id: str
    service_id: str
    service_name: str
    completed_date: str
    technician: str
    price: float
    rating: Optional[int] = None
    review: Optional[str] = None
    images: List[str] = field(default_factory=list)
    invoice_url: Optional[str] = None


@dataclass(frozen=True)
class Payment:
    id: str
    date: str
    amount: float
    method: str
    status: str
    description: str
    invoice_id: Optional[str] = None


@dataclass(frozen=True)
class PaymentMethod:
    id: str
    type: str
    last4: str
    is_default: bool
    brand: Optional[str] = None
    expiry_date: Optional[str] = None


@dataclass(frozen=True)
class PortalStats:
    total_spent: float
    completed_jobs: int
    upcoming_appointments: int
    average_rating: float


MOCK_CUSTOMER = Customer(
    id="cust_001",
    email="john.doe@example.com",
    name="John Doe",
    phone="(555) 123-4567",
    address="123 Oak Street, Apt 4B, Metro City, MC 12345",
    created_at="2024-06-15",
)

MOCK_APPOINTMENTS = [
    Appointment(
        id="apt_001",
        service_id="ceiling-fan-replacement",
        service_name="Ceiling Fan Replacement",
        date="2026-01-15",
        time="10:00 AM",
        status="scheduled",
        technician="Mike R.",
        notes="Master bedroom, customer will provide fan",
        estimated_duration="1.5 hours",
        price=160,
    ),
    Appointment(
        id="apt_002",
        service_id="light-switches-replacement",
        service_name="Smart Switch Installation",
        date="2026-01-22",
        time="2:00 PM",
        status="scheduled",
        technician="Mike R.",
        notes="3 smart switches for living room and kitchen",
        estimated_duration="1 hour",
        price=225,
    ),
]

MOCK_SERVICE_HISTORY = [
    ServiceHistoryItem(
        id="hist_001",
        service_id="light-fixture-replacement",
        service_name="Dining Room Chandelier Installation",
        completed_date="2025-11-20",
        technician="Mike R.",
        price=185,
        rating=5,
        review="Excellent work! The chandelier looks beautiful and was installed perfectly.",
        images=["https://images.unsplash.com/photo-1524484485831-a92ffc0de03f?w=400"],
        invoice_url="#",
    ),
    ServiceHistoryItem(
        id="hist_002",
        service_id="power-receptacle-replacement",
        service_name="USB Outlet Installation (4 outlets)",
        completed_date="2025-10-05",
        technician="Mike R.",
        price=360,
        rating=5,
        review="Very convenient now! No more searching for USB chargers.",
        images=[],
        invoice_url="#",
    ),
    ServiceHistoryItem(
        id="hist_003",
        service_id="ring-camera-installation",
        service_name="Ring Doorbell & 2 Cameras",
        completed_date="2025-08-15",
        technician="Mike R.",
        price=425,
        rating=5,
        review="Great security setup. Helped me configure everything on my phone.",
        images=["https://images.unsplash.com/photo-1558002038-1055907df827?w=400"],
        invoice_url="#",
    ),
]

MOCK_PAYMENTS = [
    Payment(
        id="pay_001",
        date="2025-11-20",
        amount=185,
        method="Visa •••• 4242",
        status="paid",
        description="Dining Room Chandelier Installation",
        invoice_id="INV-2025-0042",
    ),
    Payment(
        id="pay_002",
        date="2025-10-05",
        amount=360,
        method="Visa •••• 4242",
        status="paid",
        description="USB Outlet Installation",
        invoice_id="INV-2025-0038",
    ),
    Payment(
        id="pay_003",
        date="2025-08-15",
        amount=425,
        method="Visa •••• 4242",
        status="paid",
        description="Ring Security Installation",
        invoice_id="INV-2025-0029",
    ),
]

MOCK_PAYMENT_METHODS = [
    PaymentMethod(id="pm_001", type="card", brand="Visa", last4="4242", expiry_date="12/27", is_default=True),
    PaymentMethod(id="pm_002", type="card", brand="Mastercard", last4="8888", expiry_date="06/26", is_default=False),
]


class MockPortalRepository:
    def __init__(self, customer=MOCK_CUSTOMER, appointments=None, history=None, payments=None, payment_methods=None):
        self.customer = customer
        self.appointments = list(MOCK_APPOINTMENTS if appointments is None else appointments)
        self.history = list(MOCK_SERVICE_HISTORY if history is None else history)
        self.payments = list(MOCK_PAYMENTS if payments is None else payments)
        self.payment_methods = list(MOCK_PAYMENT_METHODS if payment_methods is None else payment_methods)

    async def get_customer(self):
        return self.customer

    async def get_appointments(self, upcoming_only=False):
        if upcoming_only:
            return [a for a in self.appointments if a.status == "scheduled"]
        return list(self.appointments)

    async def get_service_history(self):
        return sorted(self.history, key=lambda item: item.completed_date, reverse=True)

    async def get_payments(self):
        return sorted(self.payments, key=lambda payment: payment.date, reverse=True)

    async def get_payment_methods(self):
        return list(self.payment_methods)

    async def get_stats(self):
        ratings = [item.rating for item in self.history if item.rating is not None]
        return PortalStats(
            total_spent=sum(p.amount for p in self.payments if p.status == "paid"),
            completed_jobs=len(self.history),
            upcoming_appointments=len([a for a in self.appointments if a.status == "scheduled"]),
            average_rating=round(sum(ratings) / len(ratings), 1) if ratings else 0.0,
        )
