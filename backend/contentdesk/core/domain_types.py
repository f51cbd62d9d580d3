"""Domain Types — enumerations shared by resource schemas and models.

Invariants:
    - All valid states encoded as Enums — no raw string matching
    - Enum values equal the strings stored in the DB `status`/`type` columns

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID

ResourceId = NewType("ResourceId", UUID)


# ─── Events ──────────────────────────────────────────────────────

class EventType(str, Enum):
    WORKSHOP = "workshop"
    SEMINAR = "seminar"
    TRAINING = "training"
    MEETING = "meeting"
    CAMPAIGN = "campaign"
    OTHER = "other"


class EventStatus(str, Enum):
    """Event lifecycle — registration only open while UPCOMING."""
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# ─── Opportunities ───────────────────────────────────────────────

class OpportunityType(str, Enum):
    JOB = "job"
    INTERNSHIP = "internship"
    VOLUNTEER = "volunteer"
    FELLOWSHIP = "fellowship"
    GRANT = "grant"
    OTHER = "other"


class OpportunityCategory(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    TEMPORARY = "temporary"
    REMOTE = "remote"


class OpportunityStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    FILLED = "filled"
    DRAFT = "draft"


# ─── Publications & Reports ──────────────────────────────────────

class PublishStatus(str, Enum):
    PUBLISHED = "published"
    DRAFT = "draft"
    ARCHIVED = "archived"


class PublicationType(str, Enum):
    BOOK = "book"
    BROCHURE = "brochure"
    HANDBOOK = "handbook"
    GUIDE = "guide"
    TOOLKIT = "toolkit"
    RESEARCH = "research"
    OTHER = "other"


class ReportType(str, Enum):
    ANNUAL = "annual"
    QUARTERLY = "quarterly"
    PROJECT = "project"
    FINANCIAL = "financial"
    IMPACT = "impact"
    FIELD = "field"
    OTHER = "other"


class Quarter(str, Enum):
    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"


# ─── Newsletters & Subscribers ───────────────────────────────────

class NewsletterStatus(str, Enum):
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    SENT = "sent"
    ARCHIVED = "archived"


class SubscriptionFrequency(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
