"""
Registration page state
One implementation shared by both registration forms; a RegistrationVariant
carries the markup classes and message texts that tell them apart.
"""
import threading
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from log_config import get_logger
from models import (
    ERROR_FIELDS,
    RegistrationForm,
    RegistrationRow,
    RegistrationVariant,
    SubmissionResult,
    ValidationState,
)
from utils import escape_html, format_timestamp, get_local_now
from validation import validate_registration

log = get_logger(__name__)

INTERACTION_EVENTS = frozenset({"input", "change", "blur"})
CONSENT_MARK = "Yes"
NAME_FIELD = "fullName"

VARIANTS: Dict[str, RegistrationVariant] = {
    "a": RegistrationVariant(
        name="a",
        title="Registration A",
        table_id="submissions",
        full_name_message="Please enter your full name (first and last names), each should be at least 2 letters.",
        email_message="Enter a valid email, for instance name@example.com.",
    ),
    "b": RegistrationVariant(
        name="b",
        title="Registration B",
        table_id="submissions-table",
        tbody_id="submissions",
        row_class="text-center",
        cell_class="p-3",
        full_name_message="Please enter your full name (first and last), each at least 2 letters.",
        email_message="Enter a valid email like name@example.com.",
    ),
}


class RegistrationPage:
    """Rows are page-wide; form values and errors belong to the submitting request"""

    def __init__(self, variant: RegistrationVariant, tz_name: str):
        self.variant = variant
        self.tz_name = tz_name
        self.rows: List[RegistrationRow] = []
        self._lock = threading.Lock()

    def handle_submit(self, form: RegistrationForm, now: Optional[datetime] = None) -> SubmissionResult:
        """Validate the form; append a row and hand back a blank form when everything passes"""
        now = now or get_local_now(self.tz_name)
        state = validate_registration(form, self.variant, now)

        if not state.ok:
            log.info(
                "registration_rejected",
                variant=self.variant.name,
                fields=sorted(state.errors),
            )
            return SubmissionResult(accepted=False, form=form, state=state)

        # Hidden field is filled just before the row is written
        timestamp = format_timestamp(now)
        values = [
            form.full_name.strip(),
            form.email.strip(),
            form.phone.strip(),
            form.birth_date,
            timestamp,
            CONSENT_MARK,
        ]
        row = RegistrationRow(cells=[str(escape_html(value)) for value in values])
        with self._lock:
            self.rows.append(row)
            count = len(self.rows)

        log.info("✅ registration_row_added", variant=self.variant.name, rows=count)
        return SubmissionResult(accepted=True, timestamp=timestamp, focus=NAME_FIELD)

    def handle_interaction(self, form_event: str) -> ValidationState:
        """Any input, change or blur on the form drops every shown error"""
        if form_event not in INTERACTION_EVENTS:
            raise ValueError(f"Unsupported form event: {form_event!r}")
        log.debug("registration_errors_cleared", variant=self.variant.name, form_event=form_event)
        return ValidationState()


def error_slots(state: ValidationState) -> Dict[str, Tuple[str, bool]]:
    """Field -> (message, aria-invalid) for every slot, empty when the field passed"""
    slots = {}
    for field in ERROR_FIELDS:
        message = state.error_for(field)
        slots[field] = (message or "", message is not None)
    return slots


def build_pages(tz_name: str) -> Dict[str, RegistrationPage]:
    return {name: RegistrationPage(variant, tz_name) for name, variant in VARIANTS.items()}
