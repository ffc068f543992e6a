import pytest

from sutcourses.course_details import (
    ScrapeError,
    scrape_course_details,
    scrape_course_exams,
    scrape_course_requirements,
)
from sutcourses.models import CourseDetailResponse, Exam, ExamInfo

FULL_DETAILS_ROWS = """
<tr><td>name</td><td><b><font>SOFTWARE ENGINEERING</font></b></td></tr>
<tr><td>thai</td><td><font>วิศวกรรมซอฟต์แวร์</font></td></tr>
<tr><td>a</td><td>b</td><td><font>สำนักวิชาวิศวกรรมศาสตร์, วิศวกรรมคอมพิวเตอร์</font></td></tr>
<tr><td>c</td></tr>
<tr><td>d</td><td>e</td><td><font>ใช้งาน</font></td></tr>
"""

FULL_EXTRA_ROWS = """
<tr><td>1</td><td>เงื่อนไขรายวิชา :</td><td><a href="#">523331</a></td></tr>
<tr><td>2</td><td>รายวิชาต่อเนื่อง :</td><td><a href="#">523435</a></td></tr>
<tr><td>3</td><td>สอบกลางภาค :</td><td>9 ธ.ค. 2567 เวลา 12:00 - 14:00 อาคาร B2 ห้อง B5204 (สอบตามตารางมหาวิทยาลัย)</td></tr>
<tr><td>4</td><td>สอบประจำภาค :</td><td>27 ม.ค. 2568 เวลา 09:00 - 11:00 อาคาร B ห้อง B2102 (สอบตามตารางมหาวิทยาลัย)</td></tr>
"""


def _page(details_rows: str, extra_rows: str = "") -> str:
    return (
        "<html><body>"
        "<table><tr><td>menu</td><td>side</td><td>"
        "<table><tr><td>header</td></tr></table>"
        "<table><tr><td>left</td><td><table>"
        f"{details_rows}"
        "</table></td></tr></table>"
        "</td></tr></table>"
        f"<table>{extra_rows}</table>"
        "</body></html>"
    )


def _midterm():
    return ExamInfo(
        date="9",
        month="December",
        times="12:00-14:00",
        year="2567",
        room="อาคารB2ห้องB5204(สอบตามตารางมหาวิทยาลัย)",
    )


def _final():
    return ExamInfo(
        date="27",
        month="January",
        times="09:00-11:00",
        year="2568",
        room="อาคารBห้องB2102(สอบตามตารางมหาวิทยาลัย)",
    )


def test_scrape_full_course_details():
    result = scrape_course_details(_page(FULL_DETAILS_ROWS, FULL_EXTRA_ROWS))
    assert result == CourseDetailResponse(
        course_name_en="SOFTWARE ENGINEERING",
        course_name_th="วิศวกรรมซอฟต์แวร์",
        faculty="สำนักวิชาวิศวกรรมศาสตร์",
        department="วิศวกรรมคอมพิวเตอร์",
        course_status="ใช้งาน",
        course_condition=["523331"],
        continue_course=["523435"],
        equivalent_course=[],
        midterm=_midterm(),
        final=_final(),
    )


@pytest.mark.parametrize("html", ["", "   \n\t "])
def test_empty_page_gives_none(html):
    assert scrape_course_details(html) is None


def test_missing_table_raises():
    with pytest.raises(ScrapeError):
        scrape_course_details("<html><body><p>nothing here</p></body></html>")


def test_missing_fields_fall_back_to_not_available():
    result = scrape_course_details(_page("<tr><td>x</td></tr>"))
    assert result.course_name_en == "N/A"
    assert result.course_name_th == "N/A"
    assert (result.faculty, result.department) == ("N/A", "N/A")
    assert result.course_status == "N/A"
    assert result.midterm is None and result.final is None


def test_faculty_without_department():
    rows = FULL_DETAILS_ROWS.replace(
        "สำนักวิชาวิศวกรรมศาสตร์, วิศวกรรมคอมพิวเตอร์", "สำนักวิชาวิศวกรรมศาสตร์"
    )
    result = scrape_course_details(_page(rows))
    assert result.faculty == "สำนักวิชาวิศวกรรมศาสตร์"
    assert result.department == "N/A"


def test_requirements_drop_consecutive_repeats_only():
    html = (
        "<table>"
        "<tr><td>1</td><td>เงื่อนไขรายวิชา</td><td>"
        "<a>523201</a><a>523201</a><a>ENG23 2001</a></td></tr>"
        "<tr><td>2</td><td>รายวิชาต่อเนื่อง</td><td>"
        "<a>523453</a><a>523454</a><a>523453</a></td></tr>"
        "<tr><td>3</td><td>รายวิชาเทียบเท่า</td><td>"
        "<a>523491</a><a>CWI01 4101</a></td></tr>"
        "</table>"
    )
    result = scrape_course_requirements(html)
    assert result.course_condition == ["523201", "ENG23 2001"]
    assert result.continue_course == ["523453", "523454", "523453"]
    assert result.equivalent_course == ["523491", "CWI01 4101"]


def test_requirements_without_labels_are_empty():
    result = scrape_course_requirements("<table><tr><td>a</td><td>b</td></tr></table>")
    assert (result.course_condition, result.continue_course, result.equivalent_course) == (
        [],
        [],
        [],
    )


def test_label_must_be_in_first_text_node():
    html = (
        "<table><tr><td>1</td><td><b>x</b>เงื่อนไขรายวิชา</td>"
        "<td><a>523331</a></td></tr></table>"
    )
    assert scrape_course_requirements(html).course_condition == []


def test_label_row_without_third_cell_fails():
    html = "<table><tr><td>1</td><td>เงื่อนไขรายวิชา</td></tr></table>"
    with pytest.raises(IndexError):
        scrape_course_requirements(html)


def test_scrape_exams_from_page():
    result = scrape_course_exams(_page(FULL_DETAILS_ROWS, FULL_EXTRA_ROWS))
    assert result == Exam(midterm=_midterm(), final=_final())


def test_exams_absent():
    assert scrape_course_exams("<p>no exams</p>") == Exam(midterm=None, final=None)


def test_exam_uses_first_parsable_entry():
    html = (
        "<table>"
        "<tr><td>สอบกลางภาค</td><td>unknown</td></tr>"
        "<tr><td>สอบกลางภาค</td><td>9 ธ.ค. 2567 เวลา 12:00 - 14:00 "
        "อาคาร B2 ห้อง B5204 (สอบตามตารางมหาวิทยาลัย)</td></tr>"
        "</table>"
    )
    result = scrape_course_exams(html)
    assert result.midterm == _midterm()
    assert result.final is None