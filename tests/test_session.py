from pathlib import Path

import pytest

from filesift.session import CopyResult, Session


@pytest.fixture
def tree(tmp_path):
    source = tmp_path / "in"
    source.mkdir()
    (source / "alpha.txt").write_text("alpha")
    (source / "beta.log").write_text("beta")
    (source / "gamma.txt").write_text("gamma")
    return tmp_path


def test_keywords_insert_in_second_place():
    session = Session()
    for word in ("x", "y", "z"):
        session.add_keyword(word)
    assert session.keywords == ["x", "z", "y"]


def test_remove_keywords():
    session = Session()
    for word in ("x", "y", "z"):
        session.add_keyword(word)
    session.remove_keywords([0, 2])
    assert session.keywords == ["z"]


def test_remove_keyword_out_of_range():
    session = Session()
    session.add_keyword("x")
    with pytest.raises(IndexError):
        session.remove_keywords([3])
    assert session.keywords == ["x"]


def test_query_uses_keywords(tree):
    session = Session()
    session.add_keyword("txt")
    found = session.query(tree / "in")
    assert {entry.output_name() for entry in found} == {"alpha.txt", "gamma.txt"}


def test_query_empty_root_raises_and_clears(tree):
    session = Session()
    session.query(tree / "in")
    with pytest.raises(ValueError):
        session.query("")
    assert session.entries == []


def test_selection_operations(tree):
    session = Session()
    session.query(tree / "in")
    assert session.checked_entries() == []
    session.select_all()
    assert session.checked_entries() == session.entries
    session.set_checked(1, False)
    session.invert_selection()
    assert session.checked_entries() == [session.entries[1]]
    session.clear_selection()
    assert session.checked_entries() == []


def test_set_checked_out_of_range(tree):
    session = Session()
    session.query(tree / "in")
    with pytest.raises(IndexError):
        session.set_checked(len(session.entries), True)


def test_copy_checked(tree):
    out = tree / "out"
    out.mkdir()
    session = Session()
    session.query(tree / "in")
    session.set_checked(0, True)
    results = session.copy_checked(out)
    entry = session.entries[0]
    assert results == [CopyResult(entry.path, str(out / entry.output_name()), True)]
    assert (out / entry.output_name()).read_text() == Path(entry.path).read_text()
    assert results[0].status == "copied"


def test_copy_to_missing_folder_fails(tree):
    session = Session()
    session.query(tree / "in")
    session.select_all()
    results = session.copy_checked(tree / "nowhere")
    assert len(results) == len(session.entries)
    assert not any(result.success for result in results)
    assert results[0].status == "failed"


def test_copy_log_is_newest_first(tree):
    out = tree / "out"
    out.mkdir()
    session = Session()
    session.query(tree / "in")
    session.select_all()
    results = session.copy_checked(out)
    assert session.copy_log == list(reversed(results))


def test_copy_without_output_raises(tree):
    session = Session()
    session.query(tree / "in")
    with pytest.raises(ValueError):
        session.copy_checked("")