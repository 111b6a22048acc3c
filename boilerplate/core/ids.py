"""
ID generation: run_id
"""

import uuid
from datetime import UTC, datetime


def generate_run_id() -> str:
    """
    Generate a run ID.

    Unique per invocation: UUID v4
    Format: RUN-{timestamp}-{uuid[:8]}

    Returns:
        run_id string
    """
    now = datetime.now(UTC)
    timestamp = now.strftime("%Y%m%d%H%M%S")
    unique = uuid.uuid4().hex[:8]

    return f"RUN-{timestamp}-{unique}"
