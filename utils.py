from datetime import date, datetime
import pytz
from markupsafe import Markup, escape


def get_local_now(tz_name: str) -> datetime:
    """Current time in the configured timezone"""
    return datetime.now(pytz.timezone(tz_name))


def format_timestamp(moment: datetime) -> str:
    """Readable and sortable: 'YYYY-MM-DD HH:MM:SS'"""
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def age_in_years(birth: date, today: date) -> int:
    """Whole years, minus one if this year's birthday hasn't come yet"""
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def escape_html(value) -> Markup:
    """Replace & < > " ' with entities so user text can't become markup"""
    return escape(str(value))
