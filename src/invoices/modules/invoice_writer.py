import re
from pathlib import Path

from loguru import logger

from shared_modules.utils import ensure_dir

from .invoice import Invoice

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def invoice_file_name(invoice: Invoice) -> str:
    """
    Dateiname im Format invoice_<Kunde>_<YYYY>_<MM>.txt (Monat 1-basiert).
    """
    client = _UNSAFE_CHARS.sub("_", invoice.client.name).strip("_") or "client"
    return f"invoice_{client}_{invoice.invoice_year}_{invoice.invoice_month + 1:02d}.txt"


def write_invoice(invoice: Invoice, output_dir: Path) -> Path:
    """
    Schreibt die formatierte Rechnung als Textdatei ins Ausgabeverzeichnis.

    Args:
        invoice (Invoice): Die zu schreibende Rechnung.
        output_dir (Path): Zielverzeichnis, wird bei Bedarf angelegt.

    Returns:
        Path: Pfad der geschriebenen Datei.
    """
    target = ensure_dir(output_dir) / invoice_file_name(invoice)
    target.write_text(invoice.render(), encoding="utf-8")
    logger.info(f"Rechnung für {invoice.client.name} gespeichert: {target}")
    return target
