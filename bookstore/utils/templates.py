from pathlib import Path
from fastapi.templating import Jinja2Templates

TEMPLATES_DIRECTORY = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIRECTORY))


def format_date(value) -> str:
    if value is None:
        return ""
    return value.isoformat()


templates.env.filters["date"] = format_date
