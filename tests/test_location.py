from _lexrule.location import SrcLoc


def test_properties():
    loc = SrcLoc((1, 5), (2, 3), (4, 12))
    assert (loc.start_line, loc.start_col) == (1, 5)
    assert (loc.end_line, loc.end_col) == (2, 3)
    assert (loc.start_byte, loc.end_byte) == (4, 12)


def test_str():
    assert str(SrcLoc((1, 1), (1, 3), (0, 3))) == "1:1-1:3"
    assert str(SrcLoc.at(1, 8, 7)) == "1:8"


def test_equality():
    assert SrcLoc.at(1, 1, 0) == SrcLoc((1, 1), (1, 1), (0, 0))
