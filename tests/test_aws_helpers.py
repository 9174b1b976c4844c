import pytest
from utils.aws_helpers import get_region_from_az, resolve_region, tags_to_dict


class TestGetRegionFromAz:
    """Test region extraction from availability zones."""

    def test_standard_az(self):
        """Test standard AZ format."""
        assert get_region_from_az("us-east-1a") == "us-east-1"
        assert get_region_from_az("eu-west-2b") == "eu-west-2"
        assert get_region_from_az("ap-southeast-1c") == "ap-southeast-1"

    def test_local_zone(self):
        """Test Local Zone format."""
        assert get_region_from_az("us-east-1-bos-1a") == "us-east-1"
        assert get_region_from_az("us-west-2-lax-1a") == "us-west-2"

    def test_wavelength_zone(self):
        """Test Wavelength Zone format."""
        assert get_region_from_az("us-east-1-wl1-bos-wlz-1") == "us-east-1"

    def test_empty_az(self):
        """Test empty/None AZ."""
        assert get_region_from_az(None) is None
        assert get_region_from_az("") is None

    def test_malformed_az(self):
        """Test malformed AZ (short string)."""
        assert get_region_from_az("us") == "us"
        assert get_region_from_az("us-east") == "us-east"


class TestResolveRegion:
    """Test region selection for the EC2 client."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        monkeypatch.delenv("AWS_REGION", raising=False)
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)

    def test_aws_region_wins(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "eu-central-1")
        monkeypatch.setenv("AWS_DEFAULT_REGION", "us-west-2")

        assert resolve_region("us-east-1a") == "eu-central-1"

    def test_default_region(self, monkeypatch):
        monkeypatch.setenv("AWS_DEFAULT_REGION", "us-west-2")

        assert resolve_region("us-east-1a") == "us-west-2"

    def test_falls_back_to_az(self):
        assert resolve_region("ap-south-1b") == "ap-south-1"

    def test_nothing_configured(self):
        assert resolve_region() is None


class TestTagsToDict:
    """Test EC2 tag list flattening."""

    def test_tags(self):
        tags = [{"Key": "owner", "Value": "sre"}, {"Key": "env", "Value": "prod"}]

        assert tags_to_dict(tags) == {"owner": "sre", "env": "prod"}

    def test_missing_value(self):
        assert tags_to_dict([{"Key": "flag"}]) == {"flag": ""}

    def test_no_tags(self):
        assert tags_to_dict(None) == {}
        assert tags_to_dict([]) == {}
