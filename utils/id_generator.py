import uuid
from datetime import datetime


def generate_plan_id() -> str:
    return f"DP-{datetime.now().strftime('%Y%m%d%H%M%S')}-{uuid.uuid4().hex[:8]}"
