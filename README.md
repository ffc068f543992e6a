# sutcourses

A small HTTP service that searches the university course registrar and returns
the matching courses as JSON, grouped by course code and version. For each
course it collects the English and Thai names, faculty, department, credit,
prerequisites, follow-on and equivalent courses, and every section with its
professors, schedule, rooms, seats and midterm/final exam times.

Registrar pages are downloaded with `httpx`, decoded as windows-874 (a leading
UTF-8 or UTF-16 byte order mark is honoured) and parsed with BeautifulSoup's
`html5lib` tree builder.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

Settings are read from the environment. A `.env` file found from the working
directory is loaded first if there is one.

| Variable         | Meaning                                                  |
|------------------|----------------------------------------------------------|
| `COURSE_REG_URL` | Base URL of the registrar's course search page           |
| `SERVER_PORT`    | Port to listen on, on all interfaces (0 to 65535)        |
| `STAGE`          | `Local`, `Development` or `Prodcution`                   |

`sutcourses.config.load_config()` raises `ConfigError` when `COURSE_REG_URL`
or `SERVER_PORT` is missing or the port is not a valid number.
`sutcourses.config.get_stage()` returns the `Stage` named by `STAGE`, and
`Stage.DEVELOPMENT` when it is unset or unknown; the server itself does not
use the stage.

Example `.env`:

```
COURSE_REG_URL=http://localhost:8080/registrar/class_info_1.asp
SERVER_PORT=8000
```

## Running

```
sutcourses
```

The command takes no options besides `--help`. It logs at debug level, exits
with status 1 if the configuration cannot be loaded, and otherwise serves
until interrupted with Ctrl+C.

## Endpoints

- `GET /health` — plain-text liveness check.
- `GET /courses?acad_year=2567&semester=2&course_code=523332&course_name=` —
  searches the registrar and returns a JSON list of grouped courses. Each item
  has `course_code`, `version`, `course_name` (`en`, `th`), `credit`,
  `degree`, `department`, `faculty`, `course_status`, `course_condition`,
  `continue_course`, `equivalent_course`, `sections_count` and `sections`.
  All four query parameters are required and `semester` must be a number from
  0 to 255; otherwise the answer is status 400. Scraping failures return
  status 500 with the error text.
- Any other path returns 404.

Cross-origin `GET` and `POST` requests are allowed from any origin.

## Using it as a library

```python
import asyncio

from sutcourses.models import CourseSearch, to_json_dict
from sutcourses.scraper import CourseUrlScraper
from sutcourses.use_cases import SearchCoursesUseCase

async def run():
    scraper = CourseUrlScraper("http://localhost:8080/registrar/class_info_1.asp", None)
    use_case = SearchCoursesUseCase(scraper)
    search = CourseSearch(acad_year="2567", semester=2, course_code="523332", course_name="")
    courses = await use_case.search_courses(search)
    print(to_json_dict(courses))

asyncio.run(run())
```

`sutcourses.server.create_app(use_case)` builds the Starlette application
around any `SearchCoursesUseCase`, so a different `CourseScraper` subclass can
be plugged in.

The parsing helpers can also be used on their own:

- `sutcourses.course_details.scrape_course_details(html)` parses a course
  detail page (`None` for an empty page, `ScrapeError` when the details table
  is missing); `scrape_course_requirements(html)` and
  `scrape_course_exams(html)` return just the related courses or the exams.
- `sutcourses.courses_data.extract_base_rows(html)` reads the rows of a search
  result page, and `scrape_course_data(html, fetch_details)` adds each
  course's details and groups the sections with `group_courses(courses)`.
- `sutcourses.exam_info.extract_exam_info(text)` parses an exam date cell such
  as `9 ธ.ค. 2567 เวลา 12:00 - 14:00 ...`.
- `sutcourses.string_utils.trim_space(text)` and
  `extract_value_in_brackets(text)` are the text helpers used throughout.