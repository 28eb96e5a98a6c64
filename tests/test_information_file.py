import pytest

from motscore.information_file import InformationFile, MetricsError

SEQINFO = "\n".join(
    [
        "[Sequence]",
        "name=MOT17-02-FRCNN",
        "imDir=img1",
        "frameRate=30",
        "seqLength=600",
        "imWidth=1920",
        "imHeight=1080",
        "",
    ]
)


@pytest.fixture
def seqinfo(tmp_path):
    path = tmp_path / "seqinfo.ini"
    path.write_text(SEQINFO, encoding="utf-8")
    return InformationFile(path)


def test_search_int(seqinfo):
    assert seqinfo.search_int("seqLength") == 600
    assert seqinfo.search_int("frameRate") == 30


def test_search_string(seqinfo):
    assert seqinfo.search_string("name") == "MOT17-02-FRCNN"
    assert seqinfo.search_string("imDir") == "img1"


def test_search_not_found(seqinfo):
    with pytest.raises(MetricsError):
        seqinfo.search("nonexistent")


def test_search_int_rejects_text(seqinfo):
    with pytest.raises(MetricsError):
        seqinfo.search_int("name")


def test_value_is_trimmed(tmp_path):
    path = tmp_path / "info.ini"
    path.write_text("seqLength =  42  \n", encoding="utf-8")
    assert InformationFile(path).search_int("seqLength") == 42


def test_first_prefix_match_wins(tmp_path):
    path = tmp_path / "info.ini"
    path.write_text("imWidth=640\nim=3\n", encoding="utf-8")
    assert InformationFile(path).search("im") == "640"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        InformationFile(tmp_path / "absent.ini")