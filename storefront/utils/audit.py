# storefront/utils/audit.py
import logging

from storefront.models.log import AuditTrail

logger = logging.getLogger(__name__)


def write_log(trail: AuditTrail, *, action, resource, status="SUCCESS", meta=None):
    entry = trail.append(action=action, resource=resource, status=status, meta=meta)
    level = logging.INFO if status == "SUCCESS" else logging.WARNING
    logger.log(level, "%s %s %s meta=%s", action, resource, status, entry.meta)
    return entry
