import sys
from pathlib import Path
from typing import Any, Dict, Optional, Type

import yaml
from loguru import logger
from pydantic import BaseModel

from pydantic_models.config.formatting_config import FormattingConfig
from pydantic_models.config.invoice_config import InvoiceConfig
from pydantic_models.config.logging_config import LoggingConfig
from pydantic_models.config.service_provider_config import ServiceProviderConfig
from shared_modules.utils import log_exceptions


class Config:
    """
    Lädt und prüft die YAML-Konfiguration für die Rechnungserstellung.
    Nutzt statische Pydantic-Modelle für alle Abschnitte.
    Fehler beim Laden werden geloggt und weitergereicht.
    Die loguru-Sinks werden nur mit setup_logging=True ersetzt.
    """

    def __init__(self, config_path: Path, setup_logging: bool = False):
        self.config_path = config_path
        try:
            self.raw_config: Dict[str, Any] = self._load_config()
            self.logging = self._parse_section(self.raw_config, "logging", LoggingConfig)
            if setup_logging:
                self._setup_logging()
            logger.debug(f"Lade Konfiguration von {config_path}")
        except Exception as e:
            logger.error(f"Fehler beim Laden der Konfiguration: {e}")
            raise

        self.formatting = self._parse_section(self.raw_config, "formatting", FormattingConfig)
        self.service_provider = self._parse_section(self.raw_config, "service_provider", ServiceProviderConfig)
        self.invoice = self._parse_section(self.raw_config, "invoice", InvoiceConfig)
        logger.debug("Konfiguration erfolgreich geladen und validiert.")

    def _setup_logging(self) -> None:
        """
        Initialisiert loguru mit den Einstellungen aus der Config-Datei.
        """
        logger.remove()
        log_file = getattr(self.logging, "log_file", None)
        log_level = getattr(self.logging, "log_level", "INFO")
        if log_file:
            logger.add(log_file, level=log_level)
        logger.add(sys.stderr, level=log_level)

    def _load_config(self) -> Dict[str, Any]:
        """
        Lädt die YAML-Konfigurationsdatei. Eine leere Datei ergibt eine leere Konfiguration.
        """
        with open(self.config_path, "r") as f:
            return yaml.safe_load(f) or {}

    def _parse_section(self, config: Dict[str, Any], section: str, model: Type[BaseModel]) -> Any:
        """
        Parst einen Abschnitt der Config mit dem passenden Pydantic-Modell.
        """
        data = config.get(section) or {}
        logger.debug(f"Parsiere Abschnitt '{section}': {data}")
        return model(**data)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Allgemeiner Getter für beliebige Felder (dot-notation für verschachtelte Felder).
        """
        parts = key.split(".")
        val = self.raw_config
        for part in parts:
            if isinstance(val, dict) and part in val:
                val = val[part]
            else:
                logger.debug(f"Feld '{key}' nicht gefunden, Rückgabe Default: {default}")
                return default
        return val


def try_load_config(config_path: Optional[Path]) -> Optional[Config]:
    """
    Lädt die Konfiguration, ohne bei Fehlern abzubrechen.

    Args:
        config_path (Path, optional): Pfad zur YAML-Konfigurationsdatei.

    Returns:
        Optional[Config]: Geladene Konfiguration oder None, falls das Laden fehlschlägt.
    """
    if config_path is None:
        logger.warning("Keine Konfigurationsdatei angegeben.")
        return None
    config: Optional[Config] = None
    with log_exceptions(f"Konfiguration {config_path} konnte nicht geladen werden"):
        config = Config(config_path)
    return config


def load_business_identity(config_path: Optional[Path]) -> ServiceProviderConfig:
    """
    Liest die Geschäftsangaben des Rechnungsstellers aus der Konfiguration.

    Schlägt das Laden fehl, wird der Fehler geloggt und eine leere Identität
    zurückgegeben, damit eine Rechnung trotzdem erstellt werden kann.

    Args:
        config_path (Path, optional): Pfad zur YAML-Konfigurationsdatei.

    Returns:
        ServiceProviderConfig: Geschäftsangaben, bei Fehlern alle Felder None.
    """
    return business_identity_from(try_load_config(config_path))


def business_identity_from(config: Optional[Config]) -> ServiceProviderConfig:
    """
    Geschäftsangaben aus einer (eventuell fehlenden) Konfiguration.
    Warnt, wenn Name oder Adressteile fehlen.
    """
    identity = config.service_provider if config else ServiceProviderConfig()
    if not identity.is_complete():
        logger.warning(f"Geschäftsangaben unvollständig: {identity}")
    return identity


if __name__ == "__main__":
    config_path = Path(__file__).parent.parent.parent / ".config" / "invoice_config.yaml"
    config = Config(config_path, setup_logging=True)
    logger.info("Rechnungssteller: {}", config.service_provider.name)
