import datetime
from typing import List

from loguru import logger
from pydantic import BaseModel, Field

from pydantic_models.data.consultant_time import ConsultantTime
from shared_modules.entity import Consultant


class TimeCard(BaseModel):
    """
    Wöchentliche Zeitkarte eines Beraters.
    Enthält die Zeiterfassungen in der Reihenfolge ihrer Erfassung,
    über beliebige Kunden und Daten hinweg.
    """
    consultant: Consultant
    week_starting_day: datetime.date
    consultant_times: List[ConsultantTime] = Field(default_factory=list)

    def add_consultant_time(self, consultant_time: ConsultantTime) -> None:
        """
        Hängt eine Zeiterfassung an die Zeitkarte an.
        """
        self.consultant_times.append(consultant_time)

    @property
    def total_hours(self) -> int:
        return sum(time.hours for time in self.consultant_times)

    @property
    def total_billable_hours(self) -> int:
        return sum(time.hours for time in self.consultant_times if time.is_billable)

    @property
    def total_non_billable_hours(self) -> int:
        return sum(time.hours for time in self.consultant_times if not time.is_billable)

    def get_billable_hours_for_client(self, client_name: str) -> List[ConsultantTime]:
        """
        Liefert alle verrechenbaren Zeiterfassungen für einen Kunden.

        Der Kundenname wird exakt (Gross-/Kleinschreibung beachtend) verglichen.

        Args:
            client_name (str): Name des Kundenkontos.

        Returns:
            List[ConsultantTime]: Treffer in der Reihenfolge der Zeitkarte.
        """
        matches = [
            time
            for time in self.consultant_times
            if time.is_billable and time.client_name == client_name
        ]
        logger.debug(
            f"Zeitkarte {self.consultant} ({self.week_starting_day}): "
            f"{len(matches)} verrechenbare Einträge für '{client_name}'"
        )
        return matches

    def __str__(self) -> str:
        return f"TimeCard({self.consultant}, {self.week_starting_day:%m/%d/%Y})"
