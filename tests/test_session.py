import pytest

from minifusion.config import Limits
from minifusion.errors import FileLimitError, PageLimitError
from minifusion.session import CandidateDocument, SessionState


def _doc(session, name, pages=1):
    return CandidateDocument(doc_id=session.next_id(), file_name=name,
                             page_count=pages, reader=None)


@pytest.fixture
def session():
    return SessionState(Limits(max_files=3, max_pages_per_file=3))


def test_ids_are_unique_and_increasing(session):
    ids = [session.next_id() for _ in range(5)]
    assert ids == sorted(set(ids))


def test_append_keeps_insertion_order(session):
    for name in ("a.pdf", "b.pdf", "c.pdf"):
        session.append(_doc(session, name))
    assert [d.file_name for d in session] == ["a.pdf", "b.pdf", "c.pdf"]


def test_append_past_capacity(session):
    for name in ("a.pdf", "b.pdf", "c.pdf"):
        session.append(_doc(session, name))
    with pytest.raises(FileLimitError):
        session.append(_doc(session, "d.pdf"))
    assert len(session) == 3


def test_append_rejects_oversized(session):
    with pytest.raises(PageLimitError):
        session.append(_doc(session, "big.pdf", pages=4))
    assert not session


def test_remove_exactly_one(session):
    docs = [_doc(session, n) for n in ("a.pdf", "b.pdf", "c.pdf")]
    for d in docs:
        session.append(d)
    assert session.remove(docs[1].doc_id) is True
    assert [d.file_name for d in session] == ["a.pdf", "c.pdf"]
    assert session.remove(docs[1].doc_id) is False
    assert [d.doc_id for d in session] == [docs[0].doc_id, docs[2].doc_id]


def test_same_name_twice_gets_distinct_ids(session):
    first, second = _doc(session, "a.pdf"), _doc(session, "a.pdf")
    session.append(first)
    session.append(second)
    session.remove(first.doc_id)
    assert session.documents == (second,)


def test_totals_and_clear(session):
    session.append(_doc(session, "a.pdf", 2))
    session.append(_doc(session, "b.pdf", 3))
    assert session.total_pages == 5
    session.clear()
    assert len(session) == 0
