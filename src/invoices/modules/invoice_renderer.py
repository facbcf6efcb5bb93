import datetime
from typing import List, Optional, Sequence

from jinja2 import Environment
from loguru import logger
from pydantic import BaseModel, ConfigDict

from pydantic_models.config.formatting_config import FormattingConfig
from pydantic_models.config.service_provider_config import ServiceProviderConfig
from pydantic_models.data.invoice_line_item import InvoiceLineItem
from shared_modules.entity import Address, ClientAccount
from shared_modules.filters import babel_date, babel_decimal, create_environment
from shared_modules.utils import MonthPeriod

NA = "N/A"
PAGE_WIDTH = 80
COLUMN_WIDTHS = (10, 29, 18, 5, 10)
COLUMN_TITLES = ("Date", "Consultant", "Skill", "Hours", "Charge")
COLUMN_GAP = "  "

PAGE_HEADER_TEMPLATE = """\
{{ header.business_name }}
{{ header.business_address }}

Invoice for:
{{ client.name }}
{{ client.address }}
{{ client.contact }}

Invoice for month of: {{ header.period_start | month_year }}
Invoice Date: {{ header.invoice_date | long_date }}

{{ column_header }}
{{ column_rule }}
"""

FOOTER_TEMPLATE = """\

{{ footer }}
{{ "=" * page_width }}
"""


class InvoiceHeader(BaseModel):
    """
    Kopfdaten einer Rechnungsseite. Wird pro Renderaufruf neu erzeugt.
    """
    model_config = ConfigDict(frozen=True)

    business_name: str
    business_address: str
    period_start: datetime.date
    invoice_date: datetime.date


class InvoiceFooter(BaseModel):
    """
    Fusszeile einer Rechnungsseite mit Geschäftsname und Seitennummer.
    Die Seitennummer wird nicht verändert, next_page() liefert eine neue Fusszeile.
    """
    model_config = ConfigDict(frozen=True)

    business_name: str
    page_number: int = 1

    def next_page(self) -> "InvoiceFooter":
        return self.model_copy(update={"page_number": self.page_number + 1})

    def __str__(self) -> str:
        page = f"Page: {self.page_number:>3}"
        return f"{self.business_name:<{PAGE_WIDTH - len(page) - len(COLUMN_GAP)}}{COLUMN_GAP}{page}"


def business_address_text(business: ServiceProviderConfig) -> str:
    """
    Anschrift des Rechnungsstellers als Text.

    Fehlen Angaben, wird ein Platzhalter ausgegeben. Ein unbekanntes
    Staatskürzel wird nicht abgefangen, sondern scheitert beim Aufbau der Adresse.
    """
    if not all([business.street, business.city, business.state, business.zip_code]):
        return NA
    address = Address(
        street=business.street,
        city=business.city,
        state=business.state,
        zip_code=business.zip_code,
    )
    return str(address)


def column_header() -> str:
    return COLUMN_GAP.join(f"{title:<{width}}" for title, width in zip(COLUMN_TITLES, COLUMN_WIDTHS))


def column_rule() -> str:
    return COLUMN_GAP.join("-" * width for width in COLUMN_WIDTHS)


def format_line_item(item: InvoiceLineItem, formatting: FormattingConfig) -> str:
    """
    Formatiert eine Rechnungsposition als Zeile mit festen Spaltenbreiten.
    """
    date_width, consultant_width, skill_width, hours_width, charge_width = COLUMN_WIDTHS
    item_date = babel_date(item.date, formatting.locale, formatting.date_format)
    charge = babel_decimal(item.charge, formatting.locale, formatting.numeric_format)
    return COLUMN_GAP.join([
        f"{item_date:<{date_width}}",
        f"{str(item.consultant):<{consultant_width}}",
        f"{str(item.skill):<{skill_width}}",
        f"{item.hours:>{hours_width}d}",
        f"{charge:>{charge_width}}",
    ])


def format_total_line(total_hours: int, total_charges: float, formatting: FormattingConfig) -> str:
    # "Total: " plus Stunden füllen genau die ersten vier Spalten
    hours_width = sum(COLUMN_WIDTHS[:4]) + len(COLUMN_GAP) * 3 - len("Total: ")
    charges = babel_decimal(total_charges, formatting.locale, formatting.numeric_format)
    return f"Total: {total_hours:>{hours_width}d}{COLUMN_GAP}{charges:>{COLUMN_WIDTHS[4]}}"


def render_page_header(env: Environment, header: InvoiceHeader, client: ClientAccount) -> str:
    return env.from_string(PAGE_HEADER_TEMPLATE).render(
        header=header,
        client=client,
        column_header=column_header(),
        column_rule=column_rule(),
    )


def render_footer(env: Environment, footer: InvoiceFooter) -> str:
    return env.from_string(FOOTER_TEMPLATE).render(footer=str(footer), page_width=PAGE_WIDTH)


def render_invoice(
    client: ClientAccount,
    line_items: Sequence[InvoiceLineItem],
    business: ServiceProviderConfig,
    period: MonthPeriod,
    invoice_date: datetime.date,
    formatting: Optional[FormattingConfig] = None,
    page_capacity: int = 5,
) -> str:
    """
    Erzeugt die komplette Rechnung als Text mit Kopf- und Fusszeilen auf jeder Seite.

    Die Positionen werden in der übergebenen Reihenfolge ausgegeben. Nach jeweils
    page_capacity Positionen folgt eine Fusszeile und ein neuer Seitenkopf. Am Ende
    stehen immer die Gesamtsumme über alle Positionen und eine letzte Fusszeile,
    auch wenn die letzte Seite keine Positionen enthält.

    Args:
        client (ClientAccount): Rechnungsempfänger.
        line_items (Sequence[InvoiceLineItem]): Positionen in Erfassungsreihenfolge.
        business (ServiceProviderConfig): Geschäftsangaben des Rechnungsstellers.
        period (MonthPeriod): Abrechnungszeitraum.
        invoice_date (date): Rechnungsdatum.
        formatting (FormattingConfig, optional): Babel-Formate, sonst Standardwerte.
        page_capacity (int): Maximale Anzahl Positionen pro Seite.

    Returns:
        str: Die formatierte Rechnung.
    """
    if page_capacity < 1:
        raise ValueError(f"page_capacity muss positiv sein, erhalten: {page_capacity}")
    formatting = formatting or FormattingConfig()
    env = create_environment(formatting)

    business_name = business.name or NA
    header = InvoiceHeader(
        business_name=business_name,
        business_address=business_address_text(business),
        period_start=period.start,
        invoice_date=invoice_date,
    )
    footer = InvoiceFooter(business_name=business_name)

    parts: List[str] = [render_page_header(env, header, client)]
    items_on_page = 0
    for item in line_items:
        parts.append(format_line_item(item, formatting) + "\n")
        items_on_page += 1
        if items_on_page >= page_capacity:
            parts.append("\n")
            parts.append(render_footer(env, footer))
            footer = footer.next_page()
            parts.append(render_page_header(env, header, client))
            items_on_page = 0

    total_hours = sum(item.hours for item in line_items)
    total_charges = sum(item.charge for item in line_items)
    parts.append("\n")
    parts.append(format_total_line(total_hours, total_charges, formatting) + "\n")
    parts.append(render_footer(env, footer))

    logger.info(
        f"Rechnung für {client.name} ({period.start:%m.%Y}) erstellt: "
        f"{len(line_items)} Positionen auf {footer.page_number} Seite(n), "
        f"{total_hours} Stunden, Betrag {total_charges:.2f}"
    )
    return "".join(parts)


if __name__ == "__main__":
    print("InvoiceRenderer Modul. Nicht direkt ausführbar.")
