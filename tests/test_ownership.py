from rustdrill.drills.ownership import describe_vec, fill_vec, reborrow_total


def test_fill_empty_vec():
    assert fill_vec([]) == [22, 44, 66]


def test_fill_vec_without_argument_matches_empty():
    assert fill_vec() == fill_vec([])


def test_fill_vec_keeps_existing_items_first():
    original = [1, 2]
    result = fill_vec(original)
    assert result[:2] == original
    assert result[2:] == fill_vec()


def test_fill_vec_does_not_modify_argument():
    original = [7]
    fill_vec(original)
    assert original == [7]


def test_fill_vec_returns_fresh_list():
    first = fill_vec()
    first.append(88)
    assert len(fill_vec()) == len(first) - 1


def test_describe_vec_format(capsys):
    line = describe_vec("vec1", fill_vec())
    assert line == "vec1 has length 3 content `[22, 44, 66]`"
    assert capsys.readouterr().out == line + "\n"


def test_describe_vec_reports_length():
    vec = fill_vec()
    vec.append(88)
    line = describe_vec("vec1", vec)
    assert f"has length {len(vec)} " in line
    assert line.endswith(f"`{vec!r}`")


def test_reborrow_total():
    assert reborrow_total() == 1200