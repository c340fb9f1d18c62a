"""
Common/Shared Fixtures

Base ID generators and timestamps.
"""
import uuid
from datetime import datetime, timezone


def make_product_id() -> str:
    """Generate a unique product ID"""
    return f"prd_test_{uuid.uuid4().hex[:12]}"


def make_variant_id() -> str:
    """Generate a unique variant ID"""
    return f"var_test_{uuid.uuid4().hex[:12]}"


def make_entry_id() -> str:
    """Generate a unique entry ID"""
    return f"ent_test_{uuid.uuid4().hex[:12]}"


def make_timestamp() -> str:
    """Generate current UTC timestamp in wire format"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


REMOTE_ENDPOINT = "https://script.example.com/macros/s/test/exec"
