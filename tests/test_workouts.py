import pytest

from mmr_export.errors import WorkoutDateMissing, WorkoutIdNotFound
from mmr_export.workouts import TcxDownload, collect_downloads, extract_download, normalize_date


def test_normalize_date_replaces_slashes():
    assert normalize_date("2020/03/15") == "2020-03-15"
    assert normalize_date("2020-03-15") == "2020-03-15"


def test_extract_download_reads_trailing_workout_id():
    summary = {"view_url": "https://www.mapmyrun.com/workout/123456", "date": "2020/03/15"}
    assert extract_download(summary) == TcxDownload(date="2020-03-15", id="123456")


def test_extract_download_requires_id_at_end_of_url():
    with pytest.raises(WorkoutIdNotFound):
        extract_download({"view_url": "/workout/123456/edit", "date": "2020/03/15"})
    with pytest.raises(WorkoutIdNotFound):
        extract_download({"date": "2020/03/15"})


def test_collect_downloads_drops_records_without_id(capsys):
    summaries = [
        {"view_url": "/workout/1", "date": "2020/01/02"},
        {"view_url": "/routes/view/99", "date": "2020/01/03"},
        {"view_url": "/workout/3", "date": "2020/01/04"},
    ]
    downloads, dropped = collect_downloads(summaries)
    assert [d.id for d in downloads] == ["1", "3"]
    assert dropped == 1
    assert "ERROR FINDING WORKOUT ID" in capsys.readouterr().err


def test_extract_download_rejects_non_object_entries():
    with pytest.raises(WorkoutIdNotFound):
        extract_download(None)
    with pytest.raises(WorkoutIdNotFound):
        extract_download("oops")


def test_extract_download_requires_a_date():
    with pytest.raises(WorkoutDateMissing) as exc:
        extract_download({"view_url": "/workout/55"})
    assert exc.value.workout_id == "55"
    with pytest.raises(WorkoutDateMissing):
        extract_download({"view_url": "/workout/55", "date": "  "})


def test_collect_downloads_drops_non_object_and_undated_entries(capsys):
    summaries = [
        None,
        {"view_url": "/workout/1", "date": "2020/01/02"},
        "oops",
        42,
        {"view_url": "/workout/2"},
    ]
    downloads, dropped = collect_downloads(summaries)
    assert downloads == [TcxDownload(date="2020-01-02", id="1")]
    assert dropped == 4
    err = capsys.readouterr().err
    assert "ERROR FINDING WORKOUT ID" in err
    assert "ERROR FINDING WORKOUT DATE" in err
