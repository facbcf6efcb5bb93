import datetime
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from loguru import logger

from pydantic_models.config.formatting_config import FormattingConfig
from pydantic_models.config.invoice_config import InvoiceConfig
from pydantic_models.config.service_provider_config import ServiceProviderConfig
from pydantic_models.data.invoice_line_item import InvoiceLineItem
from shared_modules.config import business_identity_from, try_load_config
from shared_modules.entity import ClientAccount
from shared_modules.utils import get_month_period

from .invoice_renderer import render_invoice
from .time_card import TimeCard

Clock = Callable[[], datetime.date]


class Invoice:
    """
    Rechnung eines Kunden für einen Kalendermonat.

    Sammelt die verrechenbaren Stunden aus Zeitkarten als Rechnungspositionen,
    berechnet die Summen und erzeugt die formatierte Textrechnung.
    Der Monat ist 0-basiert (0 = Januar). Eine Instanz ist nicht threadsicher.
    """

    def __init__(
        self,
        client: ClientAccount,
        invoice_month: int,
        invoice_year: int,
        business: Optional[ServiceProviderConfig] = None,
        formatting: Optional[FormattingConfig] = None,
        invoice_config: Optional[InvoiceConfig] = None,
        clock: Clock = datetime.date.today,
    ):
        """
        Initialisiert die Rechnung für einen Kunden und Abrechnungsmonat.

        Args:
            client (ClientAccount): Rechnungsempfänger.
            invoice_month (int): 0-basierter Monat.
            invoice_year (int): Jahr.
            business (ServiceProviderConfig, optional): Geschäftsangaben, bereits aufgelöst.
            formatting (FormattingConfig, optional): Babel-Formate für Datum und Beträge.
            invoice_config (InvoiceConfig, optional): Seitenumbruch-Einstellungen.
            clock (Callable, optional): Liefert das Rechnungsdatum beim Rendern.

        Raises:
            ValueError: Wenn der Monat ausserhalb von 0..11 liegt.
        """
        self.client = client
        self.invoice_month = invoice_month
        self.invoice_year = invoice_year
        self.period = get_month_period(invoice_month, invoice_year)
        if business is None:
            logger.warning(f"Keine Geschäftsangaben für Rechnung an {client.name}, verwende Platzhalter.")
            business = ServiceProviderConfig()
        self.business = business
        self.formatting = formatting or FormattingConfig()
        self.invoice_config = invoice_config or InvoiceConfig()
        self.clock = clock
        self._line_items: List[InvoiceLineItem] = []

    @classmethod
    def from_config(
        cls,
        client: ClientAccount,
        invoice_month: int,
        invoice_year: int,
        config_path: Optional[Path],
        clock: Clock = datetime.date.today,
    ) -> "Invoice":
        """
        Erstellt eine Rechnung mit Geschäftsangaben und Formaten aus der YAML-Konfiguration.
        Kann die Konfiguration nicht geladen werden, wird mit Platzhaltern weitergearbeitet.
        """
        config = try_load_config(config_path)
        business = business_identity_from(config)
        if config is None:
            return cls(client, invoice_month, invoice_year, business=business, clock=clock)
        return cls(
            client,
            invoice_month,
            invoice_year,
            business=business,
            formatting=config.formatting,
            invoice_config=config.invoice,
            clock=clock,
        )

    @property
    def start_date(self) -> datetime.date:
        return self.period.start

    @property
    def end_date(self) -> datetime.date:
        return self.period.end

    @property
    def line_items(self) -> Tuple[InvoiceLineItem, ...]:
        return tuple(self._line_items)

    @property
    def total_hours(self) -> int:
        return sum(item.hours for item in self._line_items)

    @property
    def total_charges(self) -> float:
        return sum(item.charge for item in self._line_items)

    def extract_line_items(self, time_card: TimeCard) -> int:
        """
        Übernimmt die verrechenbaren Stunden des Kunden aus einer Zeitkarte.

        Es werden nur Einträge des Rechnungsmonats übernommen; das Jahr wird
        nicht verglichen. Mehrfaches Übernehmen derselben Zeitkarte zählt die
        Stunden mehrfach, der Aufrufer muss jede Zeitkarte nur einmal übergeben.

        Args:
            time_card (TimeCard): Zeitkarte eines Beraters.

        Returns:
            int: Anzahl der neu angehängten Positionen.
        """
        added = 0
        for time in time_card.get_billable_hours_for_client(self.client.name):
            if time.date.month - 1 != self.invoice_month:
                logger.debug(f"Überspringe Eintrag vom {time.date} (nicht im Rechnungsmonat)")
                continue
            self._line_items.append(
                InvoiceLineItem(
                    date=time.date,
                    consultant=time_card.consultant,
                    skill=time.skill,
                    hours=time.hours,
                )
            )
            added += 1
        logger.debug(f"{added} Positionen aus {time_card} für {self.client.name} übernommen")
        return added

    def render(self) -> str:
        """
        Erzeugt die formatierte Rechnung mit dem aktuellen Datum als Rechnungsdatum.
        """
        return render_invoice(
            client=self.client,
            line_items=self.line_items,
            business=self.business,
            period=self.period,
            invoice_date=self.clock(),
            formatting=self.formatting,
            page_capacity=self.invoice_config.max_items_per_page,
        )

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    print("Invoice Modul. Nicht direkt ausführbar.")
