import dataclasses

import pytest

from platform_identity import MacOSVersion, OSVersion, WindowsVersion


def test_unknown_is_a_singleton():
    assert OSVersion.unknown() is OSVersion.unknown()
    assert OSVersion.unknown().is_unknown()


def test_equal_fields_are_not_the_unknown_sentinel():
    lookalike = OSVersion("Unknown", "Unknown")
    assert not lookalike.is_unknown()
    assert lookalike != OSVersion.unknown()


def test_equality_is_identity():
    copy = OSVersion(MacOSVersion.CATALINA.full_name, MacOSVersion.CATALINA.version_number)
    assert copy != MacOSVersion.CATALINA
    assert MacOSVersion.CATALINA == MacOSVersion.CATALINA
    assert len({MacOSVersion.CATALINA, copy}) == 2


def test_versions_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        MacOSVersion.CATALINA.full_name = "macOS Something"


def test_ordering_is_by_full_name():
    ordered = sorted([WindowsVersion.WINDOWS_VISTA, WindowsVersion.WINDOWS_10, WindowsVersion.WINDOWS_7])
    assert [v.full_name for v in ordered] == ["Windows 10", "Windows 7", "Windows Vista"]
    assert WindowsVersion.WINDOWS_10 < WindowsVersion.WINDOWS_7
    assert WindowsVersion.WINDOWS_VISTA >= WindowsVersion.WINDOWS_8


def test_str_is_full_name():
    assert str(MacOSVersion.MOJAVE) == "macOS Mojave"


def test_mac_branding():
    assert MacOSVersion.MOUNTAIN_LION.full_name == "Mac OS X Mountain Lion"
    assert MacOSVersion.EL_CAPITAN.full_name == "Mac OS X El Capitan"
    assert MacOSVersion.SIERRA.full_name == "macOS Sierra"
    assert MacOSVersion.CATALINA.version_number == "10.15"
    assert MacOSVersion.BIG_SUR.version_number == "11"


def test_windows_version_numbers_follow_windows_prefix():
    for version in WindowsVersion.versions():
        assert version.full_name == f"Windows {version.version_number}"


@pytest.mark.parametrize("catalog", [MacOSVersion, WindowsVersion], ids=lambda c: c.__name__)
def test_catalog_entries_are_unique_and_non_empty(catalog):
    versions = catalog.versions()
    assert len({v.full_name for v in versions}) == len(versions)
    assert len({v.version_number for v in versions}) == len(versions)
    assert all(v.full_name and v.version_number for v in versions)
