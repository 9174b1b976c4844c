# config/node_context.py
import logging
import os
from dataclasses import dataclass

from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TAG_NAMESPACE = "GOAT-IN"

# field name -> environment variable
ENV_VARS = {
    "prefix": "EBS_NODE_PREFIX",
    "node_id": "EBS_NODE_ID",
    "availability_zone": "EBS_AVAILABILITY_ZONE",
    "instance_id": "EBS_INSTANCE_ID",
    "tag_namespace": "EBS_TAG_NAMESPACE",
}

REQUIRED_FIELDS = ("prefix", "node_id", "availability_zone", "instance_id")


@dataclass(frozen=True)
class NodeContext:
    """Identity of the node whose volumes are being discovered."""

    prefix: str
    node_id: str
    availability_zone: str
    instance_id: str
    tag_namespace: str = DEFAULT_TAG_NAMESPACE

    def tag_key(self, name):
        return f"{self.tag_namespace}:{name}"


def _lookup(field, overrides):
    value = overrides.get(field)
    if value is None:
        value = os.environ.get(ENV_VARS[field])
    return value.strip() if value is not None else ""


def load_node_context(**overrides):
    """Build a NodeContext from explicit overrides, then the environment.

    Overrides set to None are treated as not given.
    """
    unknown = set(overrides) - set(ENV_VARS)
    if unknown:
        raise TypeError(f"Unknown node settings: {', '.join(sorted(unknown))}")

    values = {field: _lookup(field, overrides) for field in ENV_VARS}

    missing = [ENV_VARS[f] for f in REQUIRED_FIELDS if not values[f]]
    if missing:
        raise ConfigurationError(missing)

    if not values["tag_namespace"]:
        values["tag_namespace"] = DEFAULT_TAG_NAMESPACE

    node = NodeContext(**values)
    logger.info(
        f"Node context: prefix={node.prefix} node_id={node.node_id} "
        f"az={node.availability_zone} instance_id={node.instance_id}"
    )
    return node
