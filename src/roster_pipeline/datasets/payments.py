"""
Tuition Payment Records.

Four hand-written payments followed by generated ones for August 2025.
Generated rows cycle through a pool of twenty student names and five
classes; every third one is already paid, a day after its due date.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from roster_pipeline.datasets.builder import pad_records
from roster_pipeline.domain.entities import PaymentRecord, PaymentStatus

DEFAULT_COUNT = 26

# id, name, class, amount, status, due, paid at
SEED_PAYMENTS: Tuple[Tuple[str, str, str, int, PaymentStatus, date, Optional[date]], ...] = (
    ("23834732", "Budiyono Siregar", "VII-A", 350000, PaymentStatus.UNPAID, date(2025, 8, 5), None),
    ("83746152", "Bambang Pamungkas", "IX-A", 350000, PaymentStatus.PAID, date(2025, 8, 3), date(2025, 8, 4)),
    ("10298910", "Harry Styles", "VIII-B", 350000, PaymentStatus.UNPAID, date(2025, 8, 6), None),
    ("67281920", "Freddy Mercury", "IX-A", 350000, PaymentStatus.PAID, date(2025, 8, 2), date(2025, 8, 3)),
)

PAYMENT_CLASSES = ("VII-A", "XI-A Regular", "XI-A Plus", "IX-A", "VIII-B")

PAYER_NAMES = (
    "Agus Salim", "Siti Nurhaliza", "Rudi Hartono", "Dewi Lestari", "Rangga Saputra",
    "Maya Fitri", "Andi Wijaya", "Budi Santoso", "Citra Ayu", "Doni Pratama",
    "Eka Putri", "Fajar Ramadhan", "Gita Savitri", "Halim Perdana", "Intan Permata",
    "Joko Susilo", "Kirana Wulan", "Lutfi Kurnia", "Mawar Melati", "Naufal Rizky",
)

# Billing periods offered by the month and year pickers
PERIOD_YEARS = (2023, 2024, 2025, 2026)
PERIOD_OPTIONS: Tuple[str, ...] = tuple(
    f"{year:04d}-{month:02d}" for year in PERIOD_YEARS for month in range(1, 13)
)
CURRENT_PERIOD = "2025-08"


def seed_payments() -> List[PaymentRecord]:
    """The hand-written payments only."""
    return [
        PaymentRecord(
            id=payment_id,
            name=name,
            student_class=student_class,
            amount=amount,
            status=status,
            due=due,
            paid_at=paid_at,
        )
        for payment_id, name, student_class, amount, status, due, paid_at in SEED_PAYMENTS
    ]


def make_payment(index: int) -> PaymentRecord:
    """Generated payment number ``index``."""
    paid = index % 3 == 0
    return PaymentRecord(
        id=str(90000000 + index),
        name=PAYER_NAMES[index % len(PAYER_NAMES)],
        student_class=PAYMENT_CLASSES[index % len(PAYMENT_CLASSES)],
        amount=300000 + (index % 4) * 50000,
        status=PaymentStatus.PAID if paid else PaymentStatus.UNPAID,
        due=date(2025, 8, 2 + index % 20),
        paid_at=date(2025, 8, 3 + index % 20) if paid else None,
    )


def build_payments(count: int = DEFAULT_COUNT) -> List[PaymentRecord]:
    """Seed payments padded with generated ones up to ``count``."""
    return pad_records(seed_payments(), count, make_payment)
