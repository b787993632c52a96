import re

from fastapi.testclient import TestClient

from registration import VARIANTS
from validation import PHONE_MESSAGE


def tbody(html):
    return html.split("<tbody", 1)[1].split("</tbody>", 1)[0]


def test_health(client):
    assert client.get("/").json()["status"] == "healthy"

    body = client.get("/health").json()
    assert body["attendance_days"] == ["Mon", "Tue", "Wed", "Thu", "Fri"]
    assert body["registration_forms"] == ["a", "b"]


def test_attendance_page_lists_configured_days(client):
    html = client.get("/attendance").text

    assert 'id="addCourseForm"' in html
    for day in ["Mon", "Tue", "Wed", "Thu", "Fri"]:
        assert f'value="{day}"' in html


def test_attendance_submit_renders_row(client):
    response = client.post("/attendance", data={"courseName": " Physics ", "day": ["Mon", "Wed"]})

    assert response.status_code == 200
    rows = tbody(response.text)
    assert "<td>Physics</td>" in rows
    assert rows.count('class="day-cell"') == 5
    assert '<td class="day-cell" data-day="Mon">✅</td>' in rows
    assert '<td class="day-cell" data-day="Tue">❌</td>' in rows
    assert '<td class="day-cell" data-day="Wed">✅</td>' in rows


def test_attendance_blank_name_adds_no_row(client):
    client.post("/attendance", data={"courseName": "   ", "day": ["Mon"]})

    assert "<tr" not in tbody(client.get("/attendance").text)


def test_registration_success(client, valid_fields):
    response = client.post("/register/a", data=valid_fields)

    assert response.status_code == 200
    rows = tbody(response.text)
    assert "<td>Maija Meikäläinen</td>" in rows
    assert "<td>Yes</td>" in rows
    stamp = re.search(r'id="timestamp" name="timestamp" value="([^"]*)"', response.text).group(1)
    assert re.match(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$", stamp)
    assert f"<td>{stamp}</td>" in rows


def test_registration_failure_reports_errors(client, valid_fields):
    fields = dict(valid_fields, phone="12345")

    response = client.post("/register/a", data=fields)

    assert response.status_code == 422
    assert PHONE_MESSAGE in response.text
    assert 'id="phone" name="phone" aria-invalid="true"' in response.text
    assert 'value="12345"' in response.text
    assert "<tr" not in tbody(response.text)


def test_missing_consent_fails(client, valid_fields):
    fields = dict(valid_fields)
    del fields["terms"]

    response = client.post("/register/b", data=fields)

    assert response.status_code == 422
    assert "You must accept the terms to continue." in response.text


def test_script_in_name_is_escaped(client, valid_fields):
    fields = dict(valid_fields, fullName="<script>alert(1)</script> Doe")

    response = client.post("/register/a", data=fields)

    rows = tbody(response.text)
    assert "&lt;script&gt;alert(1)&lt;/script&gt; Doe" in rows
    assert "<script>" not in rows


def test_interaction_clears_errors(client, valid_fields):
    failed = client.post("/register/a", data=dict(valid_fields, email="a@b"))
    assert VARIANTS["a"].email_message in failed.text

    for form_event in ["input", "change", "blur"]:
        response = client.post("/register/a/interaction", data={"event": form_event})
        assert response.status_code == 200
        assert response.json() == {"cleared": True, "errors": {}}


def test_rejected_form_is_not_shown_to_other_visitors(app, valid_fields):
    first, second = TestClient(app), TestClient(app)
    first.post("/register/a", data=dict(valid_fields, email="secret.person@example", fullName="Jo A"))

    html = second.get("/register/a").text

    assert "secret.person@example" not in html
    assert "Jo A" not in html
    assert VARIANTS["a"].email_message not in html
    assert 'aria-invalid="true"' not in html


def test_accepted_rows_are_shared_between_visitors(app, valid_fields):
    first, second = TestClient(app), TestClient(app)
    first.post("/register/a", data=valid_fields)

    assert "<td>Maija Meikäläinen</td>" in tbody(second.get("/register/a").text)


def test_unknown_interaction_event(client):
    response = client.post("/register/a/interaction", data={"event": "keydown"})
    assert response.status_code == 400


def test_variant_b_markup(client, valid_fields):
    response = client.post("/register/b", data=valid_fields)

    assert '<tbody id="submissions">' in response.text
    rows = tbody(response.text)
    assert '<tr class="text-center">' in rows
    assert '<td class="p-3">Yes</td>' in rows


def test_forms_keep_separate_tables(client, valid_fields):
    client.post("/register/a", data=valid_fields)

    assert "<tr" not in tbody(client.get("/register/b").text)


def test_unknown_variant(client):
    assert client.get("/register/c").status_code == 404
    assert client.post("/register/c/interaction", data={"event": "input"}).status_code == 404
