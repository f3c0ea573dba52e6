"""Ordering bounded context: checkout and order lifecycle.

Handles the checkout pipeline that charges a cart through the payment gateway
and records the resulting order, plus administrator-driven status updates on
persisted orders.
"""

import structlog
from protean.domain import Domain

from ordering.utils.logging import configure_logging

configure_logging()

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
