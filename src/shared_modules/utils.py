import calendar
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Generator

from loguru import logger
from pydantic import BaseModel, model_validator


def safe_str(val) -> str:
    """
    Gibt immer einen String zurück, auch wenn val None oder numerisch ist.
    """
    return "" if val is None else str(val)


@contextmanager
def log_exceptions(msg: str, continue_on_error: bool = True) -> Generator[None, None, None]:
    """
    Context-Manager für das Logging von Ausnahmen.
    Loggt eine Fehlermeldung und entscheidet, ob die Exception weitergereicht wird.

    Args:
        msg (str): Nachricht für das Logging im Fehlerfall.
        continue_on_error (bool): Bei False wird die Exception erneut ausgelöst, ansonsten nur geloggt.

    Beispiel:
        with log_exceptions("Fehler beim Laden der Geschäftsangaben"):
            identity = load_identity()
    """
    try:
        yield
    except Exception as e:
        logger.error(f"{msg}: {e}")
        if not continue_on_error:
            raise


def ensure_dir(path: Path) -> Path:
    """Erzeugt ein Verzeichnis (rekursiv), falls es fehlt, und gibt den Pfad zurück."""
    path.mkdir(parents=True, exist_ok=True)
    return path


class MonthPeriod(BaseModel):
    """
    Pydantic-Modell für einen Monatszeitraum (erster bis letzter Kalendertag).
    """
    start: date
    end: date

    @model_validator(mode="after")
    def end_must_be_after_start(self) -> "MonthPeriod":
        """
        Validiert, dass das Enddatum nicht vor dem Startdatum liegt.
        """
        if self.end < self.start:
            raise ValueError("Enddatum muss nach dem Startdatum liegen.")
        return self


def get_month_period(month: int, year: int) -> MonthPeriod:
    """
    Gibt den ersten und letzten Tag eines Abrechnungsmonats als Pydantic-Modell zurück.

    Args:
        month (int): 0-basierter Monat (0 = Januar, 11 = Dezember).
        year (int): Jahr.

    Returns:
        MonthPeriod: Pydantic-Modell mit Start- und Enddatum.

    Raises:
        ValueError: Wenn der Monat ausserhalb von 0..11 liegt.
    """
    if not 0 <= month <= 11:
        raise ValueError(f"Ungültiger Monat {month}, erwartet 0..11.")
    calendar_month = month + 1
    last_day = calendar.monthrange(year, calendar_month)[1]
    return MonthPeriod(start=date(year, calendar_month, 1), end=date(year, calendar_month, last_day))
