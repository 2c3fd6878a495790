"""
Centralized constants for the system.
Removes "magic strings" and gives strong typing to the common values.
"""

from enum import Enum, unique


@unique
class ClientStatus(str, Enum):
    """Client account states."""

    ACTIVE = "active"
    INACTIVE = "inactive"


@unique
class ServiceCategory(str, Enum):
    """Known catalog categories."""

    WEB_HOSTING = "webHosting"
    DOMAIN_MANAGEMENT = "domainManagement"
    WORDPRESS_MANAGEMENT = "wordPressManagement"
    EMAIL_HOSTING = "emailHosting"
    SEO_MARKETING = "seoMarketing"


@unique
class BillingCycle(str, Enum):
    """Billing periods for catalog offerings."""

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


@unique
class AssignmentStatus(str, Enum):
    """States of a service assigned to a client."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"


@unique
class TicketStatus(str, Enum):
    """Support ticket states."""

    OPEN = "open"
    IN_PROGRESS = "inProgress"
    RESOLVED = "resolved"
    CLOSED = "closed"


@unique
class TicketPriority(str, Enum):
    """Support ticket priorities."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


@unique
class AuthorType(str, Enum):
    """Who wrote a ticket message."""

    SUPPORT = "support"
    CLIENT = "client"


@unique
class IdStrategy(str, Enum):
    """Identity generation strategies for the in-memory repositories."""

    MONOTONIC = "monotonic"
    MAX_PLUS_ONE = "max_plus_one"


# Tickets that still need attention from support
OPEN_TICKET_STATUSES = (TicketStatus.OPEN, TicketStatus.IN_PROGRESS)

# Ten years; longer expiry windows are rejected by the API
MAX_EXPIRING_WINDOW_DAYS = 3650

UNKNOWN_CLIENT_NAME = "Unknown client"
UNKNOWN_SERVICE_NAME = "Service not found"
UNKNOWN_SERVICE_CATEGORY = "unknown"
