"""
Course Forms Server
Serves the attendance grid and the two registration forms, running each
submission through validation before the page is rendered again
"""
from typing import List, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse

import config
from attendance import AttendanceGrid
from log_config import get_logger, setup_logging
from models import RegistrationForm
from pages import render_attendance_page, render_registration_page
from registration import RegistrationPage, build_pages

setup_logging(json_output=config.LOG_JSON, log_level=config.LOG_LEVEL)
log = get_logger(__name__)

SERVICE_NAME = "Course Forms"
VERSION = "1.0.0"


def create_app(day_order: Optional[List[str]] = None, tz_name: Optional[str] = None) -> FastAPI:
    """Build the app with fresh, empty page state"""
    app = FastAPI(title=SERVICE_NAME)

    # Page state lives as long as the process
    app.state.grid = AttendanceGrid(day_order or config.ATTENDANCE_DAYS)
    app.state.tz_name = tz_name or config.APP_TIMEZONE
    app.state.registrations = build_pages(app.state.tz_name)

    def get_registration(variant: str) -> RegistrationPage:
        page = app.state.registrations.get(variant.lower())
        if page is None:
            raise HTTPException(status_code=404, detail=f"Unknown registration form: {variant}")
        return page

    @app.get("/")
    async def root():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": VERSION,
        }

    @app.get("/health")
    async def health():
        """Detailed health check"""
        return {
            "status": "healthy",
            "attendance_days": app.state.grid.day_order,
            "timezone": app.state.tz_name,
            "registration_forms": sorted(app.state.registrations),
        }

    @app.get("/attendance", response_class=HTMLResponse)
    def attendance_page():
        return render_attendance_page(app.state.grid)

    @app.post("/attendance", response_class=HTMLResponse)
    def add_course(courseName: str = Form(""), day: List[str] = Form([])):
        app.state.grid.handle_submit(courseName, day)
        return render_attendance_page(app.state.grid)

    @app.get("/register/{variant}", response_class=HTMLResponse)
    def registration_page(variant: str):
        return render_registration_page(get_registration(variant))

    @app.post("/register/{variant}", response_class=HTMLResponse)
    def submit_registration(
        variant: str,
        fullName: str = Form(""),
        email: str = Form(""),
        phone: str = Form(""),
        birthDate: str = Form(""),
        terms: Optional[str] = Form(None),
    ):
        page = get_registration(variant)
        form = RegistrationForm(
            full_name=fullName,
            email=email,
            phone=phone,
            birth_date=birthDate,
            terms=bool(terms),
        )
        result = page.handle_submit(form)
        return HTMLResponse(render_registration_page(page, result), status_code=200 if result.accepted else 422)

    @app.post("/register/{variant}/interaction")
    def registration_interaction(variant: str, event: str = Form(...)):
        page = get_registration(variant)
        try:
            state = page.handle_interaction(event)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return JSONResponse(content={"cleared": True, "errors": state.errors})

    log.info("forms_app_created", days=app.state.grid.day_order, timezone=app.state.tz_name)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    log.info("🚀 starting_form_server", port=config.PORT)
    log.info("📍 attendance_url", url=f"http://localhost:{config.PORT}/attendance")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
