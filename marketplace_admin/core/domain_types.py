"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ActorId, RecordId wrap str — document ids are generated strings, never ints
    - All valid states encoded as Enums — no raw string matching in policy code
    - ADMIN_OWNER is the owner sentinel for admin-created records
    - MAX_CATEGORY_DEPTH is a hard limit: products carry at most 3 category ids

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: records are JSON documents, enum values are stored as-is
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ActorId = NewType("ActorId", str)
RecordId = NewType("RecordId", str)


# ─── Constants ───────────────────────────────────────────────────

ADMIN_OWNER = "admin"
ADMIN_DISPLAY_NAME = "System Administrator"
DEFAULT_PRIORITY = 5
MAX_CATEGORY_DEPTH = 3
ALL_OWNERS = "all"


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Actor roles. MAIN_ADMIN and ADMIN share a single capability tier."""
    MAIN_ADMIN = "main_admin"
    ADMIN = "admin"
    VENDOR = "vendor"


ADMIN_ROLES = frozenset({Role.MAIN_ADMIN, Role.ADMIN})


class Collection(str, Enum):
    """Document store collections — one per record kind."""
    CATEGORIES = "categories"
    CATEGORY_SLIDERS = "category_sliders"
    COUPONS = "coupons"
    PRODUCTS = "products"
    NOTIFICATIONS = "notifications"
    VENDORS = "vendors"


class FoodType(str, Enum):
    """Only meaningful on root categories; children inherit."""
    VEG = "veg"
    NON_VEG = "non-veg"


class CategoryStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    APPROVED = "approved"


class SliderStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ProductStatus(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class DiscountType(str, Enum):
    PERCENTAGE = "Percentage"
    FIXED = "Fixed"


class CouponScope(str, Enum):
    """Coupon main-category scope."""
    ALL = "all"
    VEG = "veg"
    NON_VEG = "nonveg"


class OfferType(str, Enum):
    """Descriptive product offers — never applied to price in this layer."""
    NONE = "none"
    BOGO = "bogo"
    BXGY = "bxgy"
    BOGOF = "bogof"
    BXGYF = "bxgyf"


QUANTITY_OFFERS = frozenset({OfferType.BXGY, OfferType.BXGYF})
CROSS_PRODUCT_OFFERS = frozenset({OfferType.BOGOF, OfferType.BXGYF})


class NotificationAudience(str, Enum):
    ALL = "all"
    CUSTOMERS_ONLY = "customers_only"
    VENDORS_ONLY = "vendors_only"


class NotificationPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class VendorStatus(str, Enum):
    ACTIVE = "Active"
    PENDING = "Pending"
    SUSPENDED = "Suspended"
    REJECTED = "Rejected"
    DELETED = "Deleted"


# Vendor statuses that receive vendors_only notifications
ACTIVE_VENDOR_STATUSES = frozenset({"Active", "active", "approved"})
