from __future__ import annotations

import logging
from typing import Optional

from ..domain.models import ListFilter, OrderBy

_log = logging.getLogger(__name__)

DEFAULT_ORDER_COLUMN = "advertised_start_time"

# external attribute name -> column; column names cannot be bound as parameters
ALLOWED_ORDER_COLUMNS = {
    "meetingId": "meeting_id",
    "name": "name",
    "visible": "visible",
    "advertisedStartTime": "advertised_start_time",
}


def apply_filter(
    query: str,
    flt: Optional[ListFilter],
    logger: Optional[logging.Logger] = None,
) -> tuple[str, list]:
    """Append WHERE predicates for meeting ids / visibility. Values are always bound."""
    log = logger or _log
    where: list[str] = []
    args: list = []
    if flt is None:
        return query, args

    if flt.meeting_ids:
        where.append("meeting_id IN ({})".format(",".join(["?"] * len(flt.meeting_ids))))
        args.extend(flt.meeting_ids)

    # False or unset: no constraint on visibility
    if flt.visible:
        where.append("visible = 1")

    if where:
        query += " WHERE " + " AND ".join(where)

    log.debug("Query: (%s) and args: (%s)", query, args)
    return query, args


def check_attribute_name(attribute_name: str, logger: Optional[logging.Logger] = None) -> str:
    """Translate an external attribute name to its column, or fall back to the default column."""
    column = ALLOWED_ORDER_COLUMNS.get(attribute_name)
    if column is not None:
        return column
    (logger or _log).warning(
        "invalid attribute name of (%s), ordering by %s instead", attribute_name, DEFAULT_ORDER_COLUMN
    )
    return DEFAULT_ORDER_COLUMN


def apply_order_by(
    query: str,
    order: Optional[OrderBy],
    logger: Optional[logging.Logger] = None,
) -> str:
    if order is None:
        return query
    column = check_attribute_name(order.attribute_name, logger)
    return f"{query} ORDER BY {column} {order.direction}"
