from rustdrill.drills.generics import ReportCard, Wrapper, shopping_list


def test_shopping_list():
    assert shopping_list() == ["milk"]


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_generate_numeric_report_card():
    report_card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert report_card.print() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    report_card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert report_card.print() == "Gary Plotter (11) - achieved a grade of A+"