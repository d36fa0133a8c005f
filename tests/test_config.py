import pytest

from oae_bbb import config
from oae_bbb.errors import BBBConfigError


def test_tenant_value_overrides_global():
    assert config.get_value("cam", "bbb", "secret") == "camsecret"
    assert config.get_value("gt", "bbb", "secret") == "globalsecret"


def test_missing_value_returns_default():
    assert config.get_value("cam", "bbb", "nothere") is None
    assert config.get_value("cam", "bbb", "nothere", "fallback") == "fallback"


def test_get_config_appends_trailing_slash():
    settings = config.get_config("cam")
    assert settings.endpoint == "https://bbb.cam.example.org/bigbluebutton/"
    assert settings.secret == "camsecret"
    assert settings.checksum_type == "sha1"


def test_get_config_checksum_type_per_tenant():
    assert config.get_config("oxford").checksum_type == "sha256"


def test_verified_endpoint_leaves_slash_alone():
    assert config.verified_endpoint("http://a/") == "http://a/"


def test_missing_secret_raises(bbb_properties):
    bbb_properties.write_text("bbb.endpoint=http://bbb/\n", encoding="utf-8")
    config.reset()
    with pytest.raises(BBBConfigError) as excinfo:
        config.get_config("cam")
    assert excinfo.value.element == "secret"
    assert excinfo.value.tenant_alias == "cam"


def test_missing_endpoint_raises(bbb_properties):
    bbb_properties.write_text("bbb.secret=s\n", encoding="utf-8")
    config.reset()
    with pytest.raises(BBBConfigError) as excinfo:
        config.get_config("cam")
    assert excinfo.value.element == "endpoint"


def test_unknown_checksum_type_raises(bbb_properties):
    bbb_properties.write_text("bbb.endpoint=http://bbb/\nbbb.secret=s\nbbb.checksumType=md5\n", encoding="utf-8")
    config.reset()
    with pytest.raises(BBBConfigError):
        config.get_config("cam")



def test_tenant_falls_back_to_global_without_checksum_type():
    settings = config.get_config("gt")
    assert settings.endpoint == "https://bbb.example.org/bigbluebutton/"
    assert settings.secret == "globalsecret"
    assert settings.checksum_type == "sha1"


def test_missing_key_in_both_places_returns_default():
    assert config.get_value("gt", "bbb", "checksumType") is None
    assert config.get_value("gt", "other", "endpoint", "x") == "x"


def test_blank_value_counts_as_missing(bbb_properties):
    bbb_properties.write_text("bbb.secret=globalsecret\ncam.bbb.secret=   \n", encoding="utf-8")
    config.reset()
    assert config.get_value("cam", "bbb", "secret") == "globalsecret"
