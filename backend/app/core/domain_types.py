"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AccountId, UserId, CategoryId, TaskId wrap ints — never use bare int for identity in domain logic
    - Priority and status are IntEnums: the procedure store speaks integers
    - Securable/Permission are str Enums: settings and logs carry their string values

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Category palette and icon set live here so the API client and the UI share one source
"""

from enum import Enum, IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", int)
UserId = NewType("UserId", int)
CategoryId = NewType("CategoryId", int)
TaskId = NewType("TaskId", int)


# ─── Constants ───────────────────────────────────────────────────

BUSINESS_RULE_ERROR_NUMBER = 51000

DEFAULT_CATEGORY_COLOR = "#3498db"
HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"

CATEGORY_COLORS = (
    "#3498db",
    "#e74c3c",
    "#2ecc71",
    "#f39c12",
    "#9b59b6",
    "#1abc9c",
    "#34495e",
    "#e67e22",
)

CATEGORY_ICONS = (
    "work",
    "personal",
    "study",
    "health",
    "finance",
    "shopping",
    "home",
    "other",
)


# ─── Enums ───────────────────────────────────────────────────────

class Securable(str, Enum):
    """Permission domains guarding the internal API."""
    CATEGORY = "CATEGORY"
    TASK = "TASK"


class Permission(str, Enum):
    """CRUD permission kinds checked per operation."""
    CREATE = "CREATE"
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class TaskPriority(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2


class TaskStatus(IntEnum):
    PENDING = 0
    IN_PROGRESS = 1
    COMPLETED = 2
    CANCELLED = 3


class RecurrenceType(str, Enum):
    """Supported recurrence cadences for repeating tasks."""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
