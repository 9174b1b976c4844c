# validation/volume_groups.py
import logging

from mapper.tag_mapper import UNSET
from utils.errors import VolumeCountMismatchError, VolumeTagMismatchError

logger = logging.getLogger(__name__)

# Attributes every member of a logical volume must agree on
GROUP_FIELDS = ("volume_size", "mount_path", "fs_type", "raid_level")


def group_volumes(descriptors):
    """Group descriptors by logical volume name, keeping discovery order."""
    groups = {}
    for d in descriptors:
        groups.setdefault(d.volume_name, []).append(d)
    return groups


def validate_group(volume_name, members):
    """Raise if the members of one logical volume disagree with the first one."""
    baseline = members[0]
    expected = baseline.volume_size

    if expected != UNSET and len(members) != expected:
        raise VolumeCountMismatchError(volume_name, len(members), expected)

    for vol in members[1:]:
        mismatched = [f for f in GROUP_FIELDS if getattr(vol, f) != getattr(baseline, f)]
        if mismatched:
            raise VolumeTagMismatchError(volume_name, vol.volume_id, mismatched)


def validate_volume_groups(groups):
    for volume_name, members in groups.items():
        validate_group(volume_name, members)
    return groups


def build_volume_groups(descriptors):
    """Group and validate descriptors; returns {volume_name: [VolumeDescriptor]}."""
    logger.info("Classifying EBS volumes based on tags")
    groups = validate_volume_groups(group_volumes(descriptors))
    logger.info(
        f"Built {len(groups)} logical volumes: "
        + ", ".join(f"{name or '(untagged)'}={len(m)}" for name, m in groups.items())
    )
    return groups
