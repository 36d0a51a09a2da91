from types import SimpleNamespace

import pytest
from django.urls import reverse

from solar_calendar.context_processors import solar_today
from solar_calendar.core import SolarDate
from solar_calendar.utils import ERR_MSG

pytestmark = pytest.mark.django_db

XHR = {"HTTP_X_REQUESTED_WITH": "XMLHttpRequest"}


def test_set_solar_date_stores_session(client):
    r = client.post(reverse("solar_calendar:set_solar_date"), {"solar_date": "25-04-0026"}, **XHR)
    assert r.status_code == 200
    assert r.json() == {"ok": True, "value": "0026-04-25", "text": "October 25, Year 26"}
    assert client.session["solar_current_date"] == "0026-04-25"


def test_set_solar_date_redirects_without_xhr(client):
    r = client.post(
        reverse("solar_calendar:set_solar_date"),
        {"solar_date": "0004-SD-06"},
        HTTP_REFERER="/somewhere/",
    )
    assert r.status_code == 302
    assert r["Location"] == "/somewhere/"
    assert client.session["solar_current_date"] == "0004-SD-06"


def test_set_solar_date_rejects_bad_input(client):
    r = client.post(reverse("solar_calendar:set_solar_date"), {"solar_date": "bad"}, **XHR)
    assert r.status_code == 400
    assert r.json()["error"] == ERR_MSG
    assert "solar_current_date" not in client.session


def test_set_solar_date_reports_range_error(client):
    r = client.post(reverse("solar_calendar:set_solar_date"), {"solar_date": "0001-SD-06"})
    assert r.status_code == 400
    assert b"Solstice day must be 1-5 in year 1" in r.content


def test_set_solar_date_requires_value(client):
    r = client.post(reverse("solar_calendar:set_solar_date"), {}, **XHR)
    assert r.status_code == 400


def test_set_solar_date_is_post_only(client):
    r = client.get(reverse("solar_calendar:set_solar_date"))
    assert r.status_code == 405


def test_year_meta_view(client):
    r = client.get(reverse("solar_calendar:year_meta", args=[-4]))
    assert r.status_code == 200
    assert r.json()["days_in_year"] == 366


def test_context_processor_uses_session_date():
    request = SimpleNamespace(session={"solar_current_date": "0004-SD-06"})
    ctx = solar_today(request)
    assert ctx["SOLAR_TODAY"] == SolarDate.solstice(4, 6)
    assert ctx["SOLAR_TODAY_TEXT"] == "Solstice Day 6, Y4–5"
    assert ctx["SOLAR_CURRENT_DATE"] == "0004-SD-06"
    assert ctx["SOLAR_CALENDAR_META"]["days_in_year"] == 366


def test_context_processor_without_session_falls_back_to_today():
    ctx = solar_today(SimpleNamespace())
    assert isinstance(ctx["SOLAR_TODAY"], SolarDate)
    assert ctx["SOLAR_CURRENT_DATE"] == ""


def test_context_processor_ignores_corrupt_session_value():
    ctx = solar_today(SimpleNamespace(session={"solar_current_date": "garbage"}))
    assert isinstance(ctx["SOLAR_TODAY"], SolarDate)


def test_convert_view(client):
    r = client.get(
        reverse("solar_calendar:convert"), {"year": 0, "day": 6, "is_solstice_day": "true"}
    )
    assert r.status_code == 200
    assert r.json() == {
        "date": "2000-06-23",
        "text": "Friday, June 23, 2000",
        "solar": "0000-SD-06",
    }


def test_convert_view_regular_day(client):
    r = client.get(reverse("solar_calendar:convert"), {"year": -1, "month": 1, "day": 1})
    assert r.json()["date"] == "1998-06-24"


def test_convert_view_reports_form_errors(client):
    r = client.get(
        reverse("solar_calendar:convert"), {"year": 1, "day": 6, "is_solstice_day": "on"}
    )
    assert r.status_code == 400
    assert r.json()["errors"]["__all__"][0]["message"] == "Solstice day must be 1-5 in year 1"
    r = client.get(reverse("solar_calendar:convert"), {"year": 0, "month": 13, "day": 1})
    assert r.status_code == 400
    assert "month" in r.json()["errors"]
    r = client.get(reverse("solar_calendar:convert"), {"year": 99999, "month": 1, "day": 1})
    assert r.status_code == 400
    assert "year" in r.json()["errors"]


def test_convert_view_out_of_gregorian_range(client):
    r = client.get(reverse("solar_calendar:convert"), {"year": -1999, "month": 1, "day": 1})
    assert r.status_code == 400
    assert r.json()["errors"]["__all__"][0]["message"] == "date out of range"
