import plistlib
import sys

import pytest

from statakit.features.recent_files.service.api import list_recent_do_files, open_recent_do_file


@pytest.fixture
def recent_plist(tmp_path):
    """
    Binary preferences plist with a mix of:
    - an existing do-file
    - a deleted do-file
    - a dataset (not a do-file)
    """
    live = tmp_path / "live.do"
    live.write_text("summarize")
    data = tmp_path / "auto.dta"
    data.write_bytes(b"1")

    plist_path = tmp_path / "com.stata.stata19.plist"
    with plist_path.open("wb") as f:
        plistlib.dump(
            {"NSRecentDocumentPaths": [str(tmp_path / "deleted.do"), str(live), str(data)]},
            f,
            fmt=plistlib.FMT_BINARY,
        )
    return plist_path


def test_lists_existing_do_files_only(recent_plist, tmp_path):
    files = list_recent_do_files(recent_plist)

    assert [f.path for f in files] == [tmp_path / "live.do"]
    assert files[0].name == "live.do"
    assert files[0].is_available()


def test_xml_plist_is_read_too(tmp_path):
    do_file = tmp_path / "a.do"
    do_file.write_text("")
    plist_path = tmp_path / "prefs.plist"
    plist_path.write_bytes(plistlib.dumps({"NSRecentDocumentPaths": [str(do_file)]}))

    assert [f.path for f in list_recent_do_files(plist_path)] == [do_file]


def test_missing_or_corrupt_plist_yields_empty_list(tmp_path, caplog):
    assert list_recent_do_files(tmp_path / "nope.plist") == []

    broken = tmp_path / "broken.plist"
    broken.write_bytes(b"not a plist")
    with caplog.at_level("WARNING"):
        assert list_recent_do_files(broken) == []
    assert "Could not read Stata recent files" in caplog.text


def test_plist_without_recent_key(tmp_path):
    plist_path = tmp_path / "empty.plist"
    plist_path.write_bytes(plistlib.dumps({"Other": 1}))
    assert list_recent_do_files(plist_path) == []


def test_open_recent_do_file_checks_existence(tmp_path):
    with pytest.raises(FileNotFoundError, match="no longer exists"):
        open_recent_do_file(tmp_path / "deleted.do")


@pytest.mark.skipif(sys.platform == "win32", reason="fake open binary is a shell script")
def test_open_recent_do_file(tmp_path, stub_open_binary):
    do_file = tmp_path / "live.do"
    do_file.write_text("")

    open_recent_do_file(do_file)

    assert str(do_file) in stub_open_binary.read_text()
