from minifusion.notices import NoticeBoard


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_notice_expires():
    clock = FakeClock()
    board = NoticeBoard(ttl=5, clock=clock)
    board.post("Only PDF files are allowed.")
    clock.now = 4.9
    assert board.current().message == "Only PDF files are allowed."
    clock.now = 5.0
    assert board.current() is None


def test_newer_notice_supersedes():
    clock = FakeClock()
    board = NoticeBoard(ttl=5, clock=clock)
    board.post("first")
    clock.now = 3
    board.post("second")
    clock.now = 6
    # first one would have expired by now, the second has not
    assert board.current().message == "second"


def test_clear():
    board = NoticeBoard()
    board.post("x")
    board.clear()
    assert board.current() is None
