import pytest

from coursehub.binfile import encode_double, encode_string, encode_uint
from coursehub.models import Submission
from coursehub.submissions import SubmissionStore


@pytest.fixture
def store(tmp_path):
    with SubmissionStore(tmp_path / "homeworks.dat") as opened:
        yield opened


def test_save_writes_wire_format(tmp_path):
    path = tmp_path / "homeworks.dat"
    with SubmissionStore(path) as store:
        store.save(Submission(100, 101, 102, "answer"))
    expected = (
        encode_uint(100)
        + encode_uint(101)
        + encode_uint(102)
        + encode_string("answer")
        + encode_double(-1.0)
    )
    assert path.read_bytes() == expected


def test_find_round_trip(store):
    first = Submission(100, 7, 3, "first answer")
    second = Submission(101, 8, 3, "second answer", 5.5)
    store.save(first)
    store.save(second)
    assert store.find(100) == first
    assert store.find(101) == second
    assert store.find(999) is None


def test_find_in_empty_file(store):
    assert store.find(100) is None


def test_get_missing_raises(store):
    store.save(Submission(100, 7, 3, "answer"))
    with pytest.raises(LookupError, match="Submission with that id was not found"):
        store.get(5)


def test_get_returns_saved(store):
    submission = Submission(100, 7, 3, "answer")
    store.save(submission)
    assert store.get(100) == submission


def test_for_assignment_and_for_student(store):
    items = [
        Submission(100, 7, 3, "a"),
        Submission(101, 8, 3, "b"),
        Submission(102, 7, 4, "c"),
    ]
    for item in items:
        store.save(item)
    assert store.for_assignment(3) == [items[0], items[1]]
    assert store.for_assignment(4) == [items[2]]
    assert store.for_student(7) == [items[0], items[2]]
    assert store.for_student(99) == []


def test_render_empty(store):
    assert store.render([]) == "There are no submited homeworks yet.\n"


def test_render_joins_lines(store):
    items = [Submission(100, 7, 3, "a"), Submission(101, 8, 3, "b", 4.0)]
    rendered = store.render(items)
    assert rendered == items[0].format_line() + items[1].format_line()
    assert "not graded" in rendered


def test_update_replaces_only_matching(store):
    first = Submission(100, 7, 3, "a")
    second = Submission(101, 8, 3, "b")
    store.save(first)
    store.save(second)
    graded = store.get(101)
    graded.set_grade(5.5)
    store.update(graded)
    assert store.get(101).grade == 5.5
    assert store.get(101).is_graded()
    assert store.get(100) == first
    assert [s.id for s in store.for_assignment(3)] == [100, 101]


def test_update_persists_across_reopen(tmp_path):
    path = tmp_path / "homeworks.dat"
    with SubmissionStore(path) as store:
        submission = Submission(100, 7, 3, "a")
        store.save(submission)
        submission.set_grade(3.0)
        store.update(submission)
    with SubmissionStore(path) as store:
        assert store.get(100).grade == 3.0


def test_update_unknown_id_keeps_content(store):
    submission = Submission(100, 7, 3, "a")
    store.save(submission)
    store.update(Submission(555, 1, 1, "x", 4.0))
    assert store.for_assignment(3) == [submission]
    assert store.find(555) is None