"""ORM Models — SQLAlchemy declarative models for all content resources.

Invariants:
    - All models inherit from Base (db/base.py) and TimestampedMixin
    - Every slugged model has a unique `slug` column

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from contentdesk.models.event import Event  # noqa: F401
from contentdesk.models.opportunity import Opportunity  # noqa: F401
from contentdesk.models.publication import Publication  # noqa: F401
from contentdesk.models.report import Report  # noqa: F401
from contentdesk.models.newsletter import Newsletter  # noqa: F401
from contentdesk.models.subscriber import Subscriber  # noqa: F401
from contentdesk.models.application import OpportunityApplication  # noqa: F401
