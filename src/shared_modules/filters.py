from datetime import date
from typing import Any, Optional

from babel.dates import format_date
from babel.numbers import format_decimal
from jinja2 import Environment, StrictUndefined, Undefined

from pydantic_models.config.formatting_config import FormattingConfig


def babel_decimal(
    value: Any,
    locale: str = "en_US",
    numeric_format: Optional[str] = None
) -> str:
    """Jinja2-Filter für numerische Formatierung mit Babel."""
    if value is None or isinstance(value, Undefined):
        return ""
    return format_decimal(value, format=numeric_format, locale=locale)


def babel_date(
    value: Any,
    locale: str = "en_US",
    date_format: Optional[str] = None
) -> str:
    """Jinja2-Filter für Datumsformatierung mit Babel."""
    if value is None or isinstance(value, Undefined):
        return ""
    if not isinstance(value, date):
        return str(value)
    return format_date(value, format=date_format or "medium", locale=locale)


def register_filters(env: Environment, config: FormattingConfig) -> None:
    """
    Registriert die Babel-Datumsfilter für den Seitenkopf im Jinja2-Environment.
    Positionen und Summen werden direkt mit babel_date/babel_decimal formatiert.
    """
    env.filters["month_year"] = lambda v: babel_date(
        v,
        config.locale,
        config.month_format
    )
    env.filters["long_date"] = lambda v: babel_date(
        v,
        config.locale,
        config.long_date_format
    )


def create_environment(config: FormattingConfig) -> Environment:
    """
    Erzeugt ein Jinja2-Environment für Textvorlagen mit registrierten Babel-Filtern.
    Zeilenumbrüche nach Block-Tags werden entfernt, der letzte Zeilenumbruch bleibt erhalten.
    """
    env = Environment(
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    register_filters(env, config)
    return env
