# clientdesk/core/audit.py
"""
Centralized audit logging.
Destructive actions (DELETE) are written as JSON lines to a dedicated
logger so they can be reviewed apart from the application log.
"""
import json
import logging
import os
from datetime import datetime, timezone
from typing import Optional

from fastapi import Request

# Configure dedicated audit logger
audit_logger = logging.getLogger("audit")
audit_logger.setLevel(logging.INFO)
audit_logger.propagate = False  # Don't duplicate to root logger


def configure_audit_log(log_file: Optional[str]) -> None:
    """
    Attach the JSON-lines file handler. Without a file the entries go to
    the console instead.
    """
    for handler in list(audit_logger.handlers):
        audit_logger.removeHandler(handler)
        handler.close()

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    audit_logger.addHandler(handler)


def log_action(
    action: str,
    resource_type: str,
    resource_id: str,
    request: Optional[Request] = None,
    details: Optional[dict] = None,
    status: str = "success",
) -> dict:
    """
    Log an action to the audit log and return the entry written.

    Args:
        action: The action performed (e.g., "DELETE", "UPDATE", "CREATE")
        resource_type: Type of resource affected (e.g., "client", "ticket")
        resource_id: Identifier of the affected resource
        request: FastAPI Request object to extract IP (optional)
        details: Additional context dictionary (optional)
        status: "success" or "failure"
    """
    client_ip = "unknown"
    if request:
        # Check for forwarded headers (reverse proxy)
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            client_ip = forwarded_for.split(",")[0].strip()
        else:
            client_ip = request.client.host if request.client else "unknown"

    log_entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "action": action.upper(),
        "resource_type": resource_type,
        "resource_id": str(resource_id),
        "ip_address": client_ip,
        "status": status,
    }
    if details:
        log_entry["details"] = details

    # Write as JSON line
    audit_logger.info(json.dumps(log_entry, ensure_ascii=False))
    return log_entry
