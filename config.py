import os
from dotenv import load_dotenv

# Load environment
load_dotenv()


def parse_day_order(raw: str):
    """Split a comma-separated weekday list, keeping order and dropping blanks"""
    days = [day.strip() for day in raw.split(",") if day.strip()]
    if not days:
        raise ValueError("ATTENDANCE_DAYS must name at least one day")
    return days


# Configuration
ATTENDANCE_DAYS = parse_day_order(os.getenv("ATTENDANCE_DAYS", "Mon,Tue,Wed,Thu,Fri"))
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "Europe/Helsinki")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_JSON = os.getenv("LOG_JSON", "false").lower() in ("true", "1", "t")
PORT = int(os.getenv("PORT", "8000"))
