from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Error slots, in the order they appear on the form
ERROR_FIELDS = ("fullName", "email", "phone", "birthDate", "terms")


class RegistrationVariant(BaseModel):
    name: str
    title: str
    table_id: str = Field(description="id of the results table")
    tbody_id: str = ""
    row_class: str = ""
    cell_class: str = ""
    full_name_message: str
    email_message: str


class RegistrationForm(BaseModel):
    """Raw values captured from the registration form at submit time"""
    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(default="", alias="fullName")
    email: str = ""
    phone: str = ""
    birth_date: str = Field(default="", alias="birthDate")
    terms: bool = False


class ValidationState(BaseModel):
    """Field name -> message, rebuilt on every validation pass"""
    errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def error_for(self, field: str) -> Optional[str]:
        return self.errors.get(field)


class AttendanceCell(BaseModel):
    day: str
    mark: str


class AttendanceRow(BaseModel):
    course_name: str
    cells: List[AttendanceCell]


class RegistrationRow(BaseModel):
    """Escaped cell text of one accepted submission"""
    cells: List[str]


class SubmissionResult(BaseModel):
    """What one submit leaves on the submitter's form; never shared between visitors"""
    accepted: bool
    form: RegistrationForm = Field(default_factory=RegistrationForm)
    state: ValidationState = Field(default_factory=ValidationState)
    timestamp: str = ""
    focus: str = "fullName"
