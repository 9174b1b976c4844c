# mapper/tag_mapper.py
import re
from dataclasses import asdict, dataclass

from utils.aws_helpers import tags_to_dict
from utils.errors import TagParseError, VolumeAttachmentError

UNSET = -1

# tag name -> descriptor field
TEXT_TAGS = {
    "VolumeName": "volume_name",
    "MountPath": "mount_path",
    "FsType": "fs_type",
}
INT_TAGS = {
    "RaidLevel": "raid_level",
    "VolumeSize": "volume_size",
}

_INT_RE = re.compile(r"[+-]?[0-9]+")

# Tag integers are 64-bit signed
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class VolumeDescriptor:
    """One physical EBS volume and the attributes its tags declare."""

    volume_id: str
    volume_name: str = ""
    raid_level: int = UNSET
    volume_size: int = UNSET
    attached_device: str = ""
    mount_path: str = ""
    fs_type: str = ""

    def to_dict(self):
        return asdict(self)


def parse_int_tag(volume_id, tag_key, value):
    """Parse a numeric tag value.

    Only an optional sign and digits within the signed 64-bit range are accepted.
    """
    if value is None or not _INT_RE.fullmatch(value):
        raise TagParseError(volume_id, tag_key, value)
    parsed = int(value)
    if not INT_MIN <= parsed <= INT_MAX:
        raise TagParseError(volume_id, tag_key, value)
    return parsed


def map_volume(record, instance_id, namespace):
    """Turn one raw DescribeVolumes record into a VolumeDescriptor."""
    volume_id = record["VolumeId"]
    fields = {}

    for attachment in record.get("Attachments", []):
        attached_to = attachment.get("InstanceId")
        if attached_to != instance_id:
            raise VolumeAttachmentError(volume_id, attached_to)
        fields["attached_device"] = attachment.get("Device", "")

    prefix = f"{namespace}:"
    for key, value in tags_to_dict(record.get("Tags")).items():
        if not key.startswith(prefix):
            continue
        name = key[len(prefix):]
        if name in TEXT_TAGS:
            fields[TEXT_TAGS[name]] = value
        elif name in INT_TAGS:
            fields[INT_TAGS[name]] = parse_int_tag(volume_id, key, value)

    return VolumeDescriptor(volume_id=volume_id, **fields)


def map_volumes(records, node):
    """Map every raw record for ``node``, stopping at the first bad one."""
    return [map_volume(r, node.instance_id, node.tag_namespace) for r in records]
