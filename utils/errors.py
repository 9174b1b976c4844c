# utils/errors.py


class VolumeDiscoveryError(Exception):
    """Base class for every failure raised while discovering node volumes."""


class ConfigurationError(VolumeDiscoveryError, ValueError):
    """Required node settings are missing."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing required node settings: {', '.join(self.missing)}")


class VolumeLookupError(VolumeDiscoveryError):
    """The DescribeVolumes query failed."""


class DataIntegrityError(VolumeDiscoveryError):
    """A volume record contradicts what the node expects."""


class VolumeAttachmentError(DataIntegrityError):
    def __init__(self, volume_id, instance_id):
        self.volume_id = volume_id
        self.instance_id = instance_id
        super().__init__(f"Volume {volume_id} attached to different instance-id: {instance_id}")


class TagParseError(DataIntegrityError):
    def __init__(self, volume_id, tag_key, value):
        self.volume_id = volume_id
        self.tag_key = tag_key
        self.value = value
        super().__init__(f"Couldn't parse {tag_key} tag as int on volume {volume_id}: {value!r}")


class ConsistencyError(VolumeDiscoveryError):
    """Members of a logical volume disagree with each other."""


class VolumeCountMismatchError(ConsistencyError):
    def __init__(self, volume_name, found, expected):
        self.volume_name = volume_name
        self.found = found
        self.expected = expected
        super().__init__(
            f"Found {found} volumes, expected {expected} from VolumeSize tag (vol_name={volume_name})"
        )


class VolumeTagMismatchError(ConsistencyError):
    def __init__(self, volume_name, volume_id, fields):
        self.volume_name = volume_name
        self.volume_id = volume_id
        self.fields = list(fields)
        super().__init__(
            f"Mismatched tags among disks of same volume: {', '.join(self.fields)} "
            f"(vol_name={volume_name} vol_id={volume_id})"
        )
