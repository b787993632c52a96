"""
HTML for the three form pages
Templates are autoescaped; registration cells arrive already escaped.
"""
from typing import Optional

from jinja2 import DictLoader, Environment

from attendance import AttendanceGrid, COURSE_FIELD
from models import SubmissionResult
from registration import INTERACTION_EVENTS, RegistrationPage, error_slots

LAYOUT = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
</head>
<body>
  <h1>{{ title }}</h1>
  {% block content %}{% endblock %}
</body>
</html>
"""

ATTENDANCE = """{% extends "layout.html" %}
{% block content %}
<form id="addCourseForm" method="post" action="/attendance">
  <label for="courseName">Course</label>
  <input type="text" id="{{ course_field }}" name="{{ course_field }}"{% if grid.focus == course_field %} autofocus{% endif %}>
  <fieldset>
    {% for day in grid.day_order %}
    <label><input type="checkbox" name="day" value="{{ day }}"> {{ day }}</label>
    {% endfor %}
  </fieldset>
  <button type="submit">Add course</button>
</form>
<table id="timetable">
  <thead>
    <tr><th>Course</th>{% for day in grid.day_order %}<th>{{ day }}</th>{% endfor %}</tr>
  </thead>
  <tbody>
    {% for row in grid.rows %}
    <tr>
      <td>{{ row.course_name }}</td>
      {% for cell in row.cells %}<td class="day-cell" data-day="{{ cell.day }}">{{ cell.mark }}</td>{% endfor %}
    </tr>
    {% endfor %}
  </tbody>
</table>
{% endblock %}
"""

REGISTRATION = """{% extends "layout.html" %}
{% macro field_attrs(name) -%}
id="{{ name }}" name="{{ name }}"{% if slots[name][1] %} aria-invalid="true"{% endif %}{% if focus == name %} autofocus{% endif %}
{%- endmacro %}
{% macro error_slot(name) -%}
<span class="error" id="err-{{ name }}">{{ slots[name][0] }}</span>
{%- endmacro %}
{% block content %}
<form id="regForm" method="post" action="/register/{{ variant.name }}" novalidate>
  <label for="fullName">Full name</label>
  <input type="text" {{ field_attrs("fullName") }} value="{{ form.full_name }}">
  {{ error_slot("fullName") }}

  <label for="email">Email</label>
  <input type="email" {{ field_attrs("email") }} value="{{ form.email }}">
  {{ error_slot("email") }}

  <label for="phone">Phone</label>
  <input type="tel" {{ field_attrs("phone") }} value="{{ form.phone }}">
  {{ error_slot("phone") }}

  <label for="birthDate">Birth date</label>
  <input type="date" {{ field_attrs("birthDate") }} value="{{ form.birth_date }}">
  {{ error_slot("birthDate") }}

  <label><input type="checkbox" {{ field_attrs("terms") }}{% if form.terms %} checked{% endif %}> I accept the terms</label>
  {{ error_slot("terms") }}

  <input type="hidden" id="timestamp" name="timestamp" value="{{ timestamp }}">
  <button type="submit">Register</button>
</form>
<table id="{{ variant.table_id }}">
  <thead>
    <tr><th>Name</th><th>Email</th><th>Phone</th><th>Birth date</th><th>Submitted</th><th>Terms</th></tr>
  </thead>
  <tbody{% if variant.tbody_id %} id="{{ variant.tbody_id }}"{% endif %}>
    {% for row in page.rows %}
    <tr{% if variant.row_class %} class="{{ variant.row_class }}"{% endif %}>
      {# cells were escaped when the row was appended #}
      {% for cell in row.cells %}<td{% if variant.cell_class %} class="{{ variant.cell_class }}"{% endif %}>{{ cell | safe }}</td>{% endfor %}
    </tr>
    {% endfor %}
  </tbody>
</table>
<script>
  const regForm = document.getElementById("regForm");
  {% for event in events %}
  regForm.addEventListener("{{ event }}", () => {
    regForm.querySelectorAll(".error").forEach((el) => (el.textContent = ""));
    regForm.querySelectorAll("[aria-invalid]").forEach((el) => el.removeAttribute("aria-invalid"));
    fetch("/register/{{ variant.name }}/interaction", {method: "POST", body: new URLSearchParams({event: "{{ event }}"})});
  }, true);
  {% endfor %}
</script>
{% endblock %}
"""

env = Environment(
    loader=DictLoader(
        {
            "layout.html": LAYOUT,
            "attendance.html": ATTENDANCE,
            "registration.html": REGISTRATION,
        }
    ),
    autoescape=True,
)


def render_attendance_page(grid: AttendanceGrid) -> str:
    template = env.get_template("attendance.html")
    return template.render(title="Course Attendance", grid=grid, course_field=COURSE_FIELD)


def render_registration_page(page: RegistrationPage, result: Optional[SubmissionResult] = None) -> str:
    """Shared rows plus the requesting visitor's own form; a fresh form when there is no result"""
    result = result or SubmissionResult(accepted=True)
    template = env.get_template("registration.html")
    return template.render(
        title=page.variant.title,
        page=page,
        variant=page.variant,
        form=result.form,
        focus=result.focus,
        timestamp=result.timestamp,
        slots=error_slots(result.state),
        events=sorted(INTERACTION_EVENTS),
    )
