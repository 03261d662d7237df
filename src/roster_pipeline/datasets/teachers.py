"""
Teacher Records.

Eight hand-written teachers followed by generated ones drawn from a name
pool. Also holds the phone number formatting used by the teacher pages.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from roster_pipeline.datasets.builder import pad_records
from roster_pipeline.domain.entities import RecordStatus, TeacherRecord

DEFAULT_COUNT = 25

_ACTIVE = RecordStatus.ACTIVE
_NON_ACTIVE = RecordStatus.NON_ACTIVE

# id, full name, email, subjects, homeroom class, status, phone number
SEED_TEACHERS: Tuple[tuple, ...] = (
    ("102345", "Anisa Putri", "anisa.putri@school.id", ["Math 02"], "VII-B", _ACTIVE, "81922334455"),
    ("104221", "Bambang Maulana", "bambang.maulana@school.id", ["Science 01"], "VIII-A", _ACTIVE, "81299887766"),
    ("105987", "Citra Dewi", "citra.dewi@school.id", ["English 01"], "IX-B", _ACTIVE, "85211223344"),
    ("108002", "Doni Saputra", "doni.saputra@school.id", ["Programming 01"], None, _NON_ACTIVE, "87866778899"),
    ("123456", "Dafa Aulia", "dafa@gmail.com", ["Math 01", "English 01"], "VII-A", _ACTIVE, "72833817281"),
    ("789012", "Ryan Kusuma", "ryan@gmail.com", ["English 02"], "IX-A", _ACTIVE, "81234567890"),
    ("345678", "Heriyanto", "heriyanto@gmail.com", ["Math 01", "Programming 02"], None, _NON_ACTIVE, "87765432100"),
    ("901234", "Imroatus", "imroatus@gmail.com", ["Programming 01"], None, _NON_ACTIVE, "81230011223"),
)

EXTRA_NAMES = (
    "Eka Pratama",
    "Fajar Ramdhan",
    "Gita Lestari",
    "Herman Wijaya",
    "Indah Kartika",
    "Joko Santoso",
    "Kirana Safira",
    "Lutfi Rahman",
    "Maya Anggraini",
    "Nurul Mawar",
    "Oskar Firmansyah",
    "Putri Prawita",
    "Qori Safitri",
    "Raka Prakoso",
    "Sari Winata",
    "Taufik Hidayat",
    "Usman Halim",
    "Vera Damayanti",
    "Wahyu Saputra",
    "Yani Marlina",
    "Zaki Kurniawan",
)

SUBJECT_COMBOS: Tuple[Tuple[str, ...], ...] = (
    ("Math 01",),
    ("English 01",),
    ("Math 01", "Physics 01"),
    ("Biology 01",),
    ("Chemistry 01",),
    ("Programming 01",),
    ("Programming 02",),
    ("Design 01",),
    ("Art 01",),
    ("Math 02", "English 02"),
)

HOMEROOM_POOL: Tuple[Optional[str], ...] = (
    "VII-A",
    "VII-B",
    "VIII-A",
    "VIII-B",
    "IX-A",
    "IX-B",
    None,
    None,
)

PHONE_PREFIXES = ("+62", "+60", "+65", "+91")

_NON_SLUG = re.compile(r"[^a-z0-9]+")
_PHONE_GROUPS = re.compile(r"(\d{3,4})(?=\d)")
_NON_DIGITS = re.compile(r"[^0-9]+")


def slugify_name(name: str, fallback: str) -> str:
    """Dotted lower-case slug of a name, e.g. "Eka Pratama" -> "eka.pratama"."""
    slug = _NON_SLUG.sub(".", name.lower()).strip(".")
    return slug or fallback


def seed_teachers() -> List[TeacherRecord]:
    """The hand-written teachers only."""
    return [
        TeacherRecord(
            id=teacher_id,
            full_name=name,
            email=email,
            subjects=list(subjects),
            homeroom_class=homeroom,
            status=status,
            phone_prefix="+62",
            phone_number=phone,
        )
        for teacher_id, name, email, subjects, homeroom, status, phone in SEED_TEACHERS
    ]


def make_teacher(index: int) -> TeacherRecord:
    """Generated filler teacher number ``index``."""
    name = EXTRA_NAMES[index % len(EXTRA_NAMES)]
    return TeacherRecord(
        id=f"{640000 + index * 7:06d}",
        full_name=name,
        email=f"{slugify_name(name, f'teacher{index}')}@schoolmail.id",
        subjects=list(SUBJECT_COMBOS[index % len(SUBJECT_COMBOS)]),
        homeroom_class=HOMEROOM_POOL[index % len(HOMEROOM_POOL)],
        status=_NON_ACTIVE if index % 6 == 0 else _ACTIVE,
        phone_prefix=PHONE_PREFIXES[index % len(PHONE_PREFIXES)],
        phone_number=str(82000000000 + index * 12345),
    )


def build_teachers(count: int = DEFAULT_COUNT) -> List[TeacherRecord]:
    """Seed teachers padded with generated ones up to ``count``."""
    return pad_records(seed_teachers(), count, make_teacher)


def format_teacher_phone(record: TeacherRecord) -> str:
    """
    Display form of a teacher's phone number.

    Digits are grouped in fours (a trailing group of up to three stays
    attached): "+62" + "72833817281" -> "+62 7283 3817 281".
    Returns "--" when neither part is known.
    """
    prefix, number = record.phone_prefix, record.phone_number
    if not prefix and not number:
        return "--"
    if not prefix:
        return number or "--"
    if not number:
        return prefix
    grouped = _PHONE_GROUPS.sub(r"\1 ", _NON_DIGITS.sub("", number))
    return f"{prefix} {grouped}"
