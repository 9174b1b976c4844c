# utils/aws_helpers.py
import logging
import os
from botocore.config import Config

logger = logging.getLogger(__name__)

# Boto3 config with retries and timeouts
BOTO3_CONFIG = Config(
    retries={"max_attempts": 10, "mode": "adaptive"},
    connect_timeout=5,
    read_timeout=60,
)


def get_region_from_az(az):
    """Extract region from availability zone, handling Local Zones and Wavelength."""
    if not az:
        return None

    # Local Zone format: us-east-1-bos-1a (4+ parts)
    # Wavelength format: us-east-1-wl1-bos-wlz-1 (6+ parts)
    # Standard format: us-east-1a (3 parts with zone letter at end)

    parts = az.split("-")

    if len(parts) > 3:
        return "-".join(parts[:3])
    elif len(parts) == 3:
        # us-east-1a -> ["us", "east", "1a"] -> "us-east-1"
        last_part = parts[2]
        if last_part and last_part[-1].isalpha():
            last_part = last_part[:-1]
        return f"{parts[0]}-{parts[1]}-{last_part}"
    else:
        return az


def resolve_region(az=None):
    """Region from the environment, falling back to the one the AZ lives in."""
    region = os.environ.get("AWS_REGION", os.environ.get("AWS_DEFAULT_REGION"))
    if region:
        return region
    region = get_region_from_az(az)
    if region:
        logger.debug(f"No AWS region configured, using {region} from availability zone {az}")
    return region


def tags_to_dict(tags):
    """Flatten an EC2 ``[{"Key": ..., "Value": ...}]`` tag list."""
    return {t["Key"]: t.get("Value", "") for t in tags or []}
