from pathlib import Path

import pytest
from conftest import write

from hostfetch.exceptions import ParseFailure, SourceUnavailable
from hostfetch.osrelease import OSReleaseProbe, parse_os_release, parse_release_fields


def test_probe_reads_etc_os_release(fake_root: Path) -> None:
    release = OSReleaseProbe(fake_root).acquire()
    assert release.name == "Ubuntu"
    assert release.pretty_name == "Ubuntu 22.04.3 LTS"
    assert release.version == "22.04.3 LTS (Jammy Jellyfish)"
    assert release.version_id == "22.04"
    assert release.version_codename == "jammy"
    assert not release.is_rolling


def test_rolling_release_has_no_version() -> None:
    release = parse_os_release('NAME="Arch Linux"\nPRETTY_NAME="Arch Linux"\nID=arch\nBUILD_ID=rolling\n')
    assert release.version is None
    assert release.version_id is None
    assert release.version_codename is None
    assert release.is_rolling


def test_empty_value_is_not_absent() -> None:
    release = parse_os_release('NAME=Foo\nPRETTY_NAME=Foo\nVERSION_ID=""\n')
    assert release.version_id == ""
    assert release.version is None


def test_quotes_comments_and_escapes() -> None:
    fields = parse_release_fields(
        "# comment=ignored\n"
        "\n"
        "NAME='Single Quoted'\n"
        'PRETTY_NAME="Say \\"hi\\" \\\\ done"\n'
        "HOME_URL=https://example.org/?a=b\n"
    )
    assert fields == {
        "NAME": "Single Quoted",
        "PRETTY_NAME": 'Say "hi" \\ done',
        "HOME_URL": "https://example.org/?a=b",
    }


def test_missing_required_key() -> None:
    with pytest.raises(ParseFailure):
        parse_os_release("NAME=Foo\nVERSION_ID=1\n")


def test_falls_back_to_usr_lib(tmp_path: Path) -> None:
    write(tmp_path / "usr" / "lib" / "os-release", "NAME=Fedora\nPRETTY_NAME=\"Fedora Linux 39\"\nVERSION_ID=39\n")
    release = OSReleaseProbe(tmp_path).acquire()
    assert release.pretty_name == "Fedora Linux 39"
    assert release.version_id == "39"


def test_missing_sources(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailable):
        OSReleaseProbe(tmp_path).acquire()


def test_explicit_candidates(tmp_path: Path) -> None:
    custom = write(tmp_path / "release", "NAME=Custom\nPRETTY_NAME=Custom OS\n")
    assert OSReleaseProbe(candidates=[tmp_path / "absent", custom]).acquire().name == "Custom"
