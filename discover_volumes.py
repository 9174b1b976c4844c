# discover_volumes.py
import argparse
import json
import logging
import sys

from utils.logging_config import setup_logging
from utils.errors import ConfigurationError, VolumeDiscoveryError

from config.node_context import load_node_context
from scanner.ebs_scanner import scan_node_volumes
from mapper.tag_mapper import map_volumes
from validation.volume_groups import build_volume_groups
from reporting.report_builder import build_volume_report

logger = logging.getLogger(__name__)


def find_ebs_volumes(node, ec2=None):
    """Discover, map and validate the EBS volumes tagged for ``node``.

    Returns ``{volume_name: [VolumeDescriptor, ...]}``. Every failure is raised
    as a VolumeDiscoveryError subclass; the caller decides whether to abort.
    """
    records = scan_node_volumes(node, ec2=ec2)
    descriptors = map_volumes(records, node)
    return build_volume_groups(descriptors)


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="discover-ebs-volumes",
        description="Discover and validate the tagged EBS volumes of a node.",
    )
    parser.add_argument("--prefix", help="node prefix tag value (EBS_NODE_PREFIX)")
    parser.add_argument("--node-id", help="node id tag value (EBS_NODE_ID)")
    parser.add_argument("--availability-zone", help="availability zone (EBS_AVAILABILITY_ZONE)")
    parser.add_argument("--instance-id", help="owning EC2 instance id (EBS_INSTANCE_ID)")
    parser.add_argument("--tag-namespace", help="tag key namespace (EBS_TAG_NAMESPACE, default GOAT-IN)")
    parser.add_argument("--json", action="store_true", help="print the volume groups as JSON")
    parser.add_argument("--log-level", help="logging level (LOG_LEVEL, default INFO)")
    return parser.parse_args(argv)


def _to_json(groups):
    return json.dumps(
        {name: [v.to_dict() for v in members] for name, members in groups.items()},
        indent=2,
    )


def main(argv=None):
    args = _parse_args(argv)
    setup_logging(args.log_level, stream=sys.stderr)

    try:
        node = load_node_context(
            prefix=args.prefix,
            node_id=args.node_id,
            availability_zone=args.availability_zone,
            instance_id=args.instance_id,
            tag_namespace=args.tag_namespace,
        )
    except ConfigurationError as e:
        logger.error(str(e))
        return 2

    try:
        groups = find_ebs_volumes(node)
    except VolumeDiscoveryError as e:
        logger.error(f"EBS volume discovery failed: {type(e).__name__}: {e}")
        return 1

    print(_to_json(groups) if args.json else build_volume_report(node, groups))
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
