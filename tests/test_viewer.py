from gjstep.viewer import LogViewer

LINES = [f"line {i}" for i in range(70)]

def test_first_screen():
    v = LogViewer(LINES, lines_on_screen=29)
    assert v.visible() == LINES[:27]
    assert v.footer() == "Lines 1-27 / 70"
    assert v.title.startswith("Gauss-Jordan Steps")

def test_line_scrolling_stops_at_edges():
    v = LogViewer(LINES, lines_on_screen=29)
    v.up()
    assert v.top == 0
    v.down()
    assert v.top == 1
    v.top = 41
    v.down()
    assert v.top == 41

def test_paging_clamps():
    v = LogViewer(LINES, lines_on_screen=29)
    v.page_down()
    assert v.top == 29
    v.page_down()
    assert v.top == 41
    assert v.footer() == "Lines 42-68 / 70"
    v.page_up()
    assert v.top == 12
    v.page_up()
    assert v.top == 0

def test_short_transcript():
    v = LogViewer(LINES[:5], lines_on_screen=29)
    v.page_down()
    assert v.top == 0
    assert v.footer() == "Lines 1-5 / 5"

def test_keys():
    v = LogViewer(LINES, lines_on_screen=29)
    assert v.handle("d") and v.top == 1
    assert v.handle("right") and v.top == 30
    assert v.handle("u") and v.top == 29
    assert v.handle("left") and v.top == 0
    assert not v.handle("q")
