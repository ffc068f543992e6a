from urllib.parse import parse_qs, urlsplit

from sutcourses.models import CourseSearch
from sutcourses.search_url import build_search_url

BASE = "http://localhost/registrar/class_info_1.cgi"


def test_full_url_layout():
    search = CourseSearch(acad_year="2567", semester=2, course_code="523332", course_name="")
    assert build_search_url(BASE, search) == (
        BASE
        + "?coursestatus=O00&facultyid=all&acadyear=2567&semester=2"
        + "&coursecode=523332&coursename=&maxrow=50"
    )


def test_query_fields_round_trip():
    search = CourseSearch(acad_year="2566", semester=3, course_code="5233", course_name="SOFT")
    query = parse_qs(urlsplit(build_search_url(BASE, search)).query, keep_blank_values=True)
    assert query["acadyear"] == [search.acad_year]
    assert query["semester"] == [str(search.semester)]
    assert query["coursecode"] == [search.course_code]
    assert query["coursename"] == [search.course_name]
    assert query["facultyid"] == ["all"]
    assert query["maxrow"] == ["50"]


def test_base_url_is_kept_verbatim():
    search = CourseSearch(acad_year="2567", semester=1, course_code="1", course_name="x")
    url = build_search_url("http://localhost/a/b", search)
    assert url.split("?", 1)[0] == "http://localhost/a/b"