"""
Admin and Role Records.

The role-access pages list administrator accounts and the roles they
can be assigned.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from roster_pipeline.datasets.builder import pad_records
from roster_pipeline.domain.entities import AdminRecord, RecordStatus, RoleRecord

DEFAULT_COUNT = 25

ADMIN_ROLES = (
    "Admin",
    "Secondary Admin",
    "Subjects and Teachers Admin",
    "Students Report Admin",
)

SEED_ADMINS: Tuple[Tuple[str, str, str, str, int, RecordStatus], ...] = (
    ("meijiko", "Meijiko", "meijiko@gmail.com", "Admin", 6, RecordStatus.ACTIVE),
    ("ryan", "Ryan Kusuma", "ryan@gmail.com", "Secondary Admin", 4, RecordStatus.ACTIVE),
    ("heriyanto", "Heriyanto", "heriyanto@gmail.com", "Subjects and Teachers Admin", 4, RecordStatus.ACTIVE),
    ("imroatust", "Imroatust", "imroatust@gmail.com", "Students Report Admin", 5, RecordStatus.NON_ACTIVE),
)

EXTRA_ADMIN_NAMES = (
    "Intan Permata",
    "Budi Santoso",
    "Andre Simatupang",
    "Gita Prameswari",
    "Larissa Kamila",
    "Samuel Adrian",
    "Fauzan Nur",
    "Aulia Rahman",
    "Chelsea Debora",
    "Yoga Mahendra",
    "Nabila Safitri",
    "Raka Yudhistira",
    "Ajeng Maharani",
    "Pramudya Seno",
    "Kamal Fariz",
    "Dewi Lestari",
    "Putra Nugraha",
    "Siska Hapsari",
    "Dimas Prasetya",
    "Farhan Maulana",
    "Jacky Fernandez",
)

SEED_ROLES: Tuple[Tuple[str, int], ...] = (
    ("Admin", 6),
    ("Secondary Admin", 4),
    ("Subjects and Teachers Admin", 4),
    ("Students Report Admin", 5),
)

EXTRA_ROLE_NAMES = (
    "Finance Admin",
    "Library Admin",
    "Lab Admin",
    "Counseling Admin",
    "Dorm Admin",
    "Sports Admin",
    "Events Admin",
    "Transport Admin",
    "IT Support",
    "Admissions Admin",
    "Attendance Admin",
    "Curriculum Admin",
    "Schedule Admin",
    "Exams Admin",
    "Alumni Admin",
    "Health Admin",
    "Cafeteria Admin",
    "Discipline Admin",
    "Security Admin",
    "Communication Admin",
    "Procurement Admin",
)

_NON_ALPHA = re.compile(r"[^a-z]+")


def admin_slug(name: str, fallback: str) -> str:
    """Dashed lower-case slug, e.g. "Budi Santoso" -> "budi-santoso"."""
    return _NON_ALPHA.sub("-", name.lower()).strip("-") or fallback


def seed_admins() -> List[AdminRecord]:
    """The hand-written admins only."""
    return [
        AdminRecord(id=admin_id, name=name, email=email, role=role, features=features, status=status)
        for admin_id, name, email, role, features, status in SEED_ADMINS
    ]


def make_admin(index: int) -> AdminRecord:
    """Generated filler admin number ``index``."""
    name = EXTRA_ADMIN_NAMES[index % len(EXTRA_ADMIN_NAMES)]
    slug = admin_slug(name, f"admin-{index}")
    repeat = index // len(EXTRA_ADMIN_NAMES)
    if repeat:
        slug = f"{slug}-{repeat + 1}"
    return AdminRecord(
        id=slug,
        name=name,
        email=f"{slug}@tygo.school",
        role=ADMIN_ROLES[index % len(ADMIN_ROLES)],
        features=3 + (index + 1) % 4,
        status=RecordStatus.NON_ACTIVE if index % 5 == 0 else RecordStatus.ACTIVE,
    )


def build_admins(count: int = DEFAULT_COUNT) -> List[AdminRecord]:
    """Seed admins padded with generated ones up to ``count``."""
    return pad_records(seed_admins(), count, make_admin)


def seed_roles() -> List[RoleRecord]:
    """The four built-in roles."""
    return [
        RoleRecord(name=name, features=features, status=RecordStatus.ACTIVE)
        for name, features in SEED_ROLES
    ]


def make_role(index: int) -> RoleRecord:
    """Generated filler role number ``index``."""
    name = EXTRA_ROLE_NAMES[index % len(EXTRA_ROLE_NAMES)]
    repeat = index // len(EXTRA_ROLE_NAMES)
    return RoleRecord(
        name=name if repeat == 0 else f"{name} {repeat + 1}",
        features=3 + index % 4,
        status=RecordStatus.NON_ACTIVE if index % 7 == 0 else RecordStatus.ACTIVE,
    )


def build_roles(count: int = DEFAULT_COUNT) -> List[RoleRecord]:
    """Built-in roles padded with generated ones up to ``count``."""
    return pad_records(seed_roles(), count, make_role)
