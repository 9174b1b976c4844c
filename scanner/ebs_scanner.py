# scanner/ebs_scanner.py
import boto3
import logging
from botocore.exceptions import BotoCoreError, ClientError
from utils.aws_helpers import BOTO3_CONFIG, resolve_region
from utils.errors import VolumeLookupError

logger = logging.getLogger(__name__)

# region -> EC2 client
_ec2_clients = {}


def _get_ec2_client(az=None):
    """Lazy initialization of one EC2 client per region."""
    region = resolve_region(az)
    if region not in _ec2_clients:
        _ec2_clients[region] = boto3.client("ec2", region_name=region, config=BOTO3_CONFIG)
    return _ec2_clients[region]


def build_volume_filters(node):
    """DescribeVolumes filters selecting the volumes tagged for this node."""
    return [
        {"Name": f"tag:{node.tag_key('Prefix')}", "Values": [node.prefix]},
        {"Name": f"tag:{node.tag_key('NodeId')}", "Values": [node.node_id]},
        {"Name": "availability-zone", "Values": [node.availability_zone]},
    ]


def scan_node_volumes(node, ec2=None):
    """Return the raw volume records tagged for ``node`` in its availability zone."""
    ec2 = ec2 or _get_ec2_client(node.availability_zone)
    volumes = []
    logger.info("Searching for EBS volumes")

    try:
        paginator = ec2.get_paginator("describe_volumes")

        for page in paginator.paginate(Filters=build_volume_filters(node)):
            volumes.extend(page.get("Volumes", []))
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Error when searching for EBS volumes: {e}", exc_info=True)
        raise VolumeLookupError(f"Error when searching for EBS volumes: {e}") from e

    logger.info(f"Found {len(volumes)} EBS volumes (prefix={node.prefix} node_id={node.node_id})")
    return volumes
