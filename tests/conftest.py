"""
Pytest configuration and shared fixtures.
"""

from datetime import date

import pytest
from loguru import logger

from invoices.modules.time_card import TimeCard
from pydantic_models.config.service_provider_config import ServiceProviderConfig
from pydantic_models.data.consultant_time import ConsultantTime
from pydantic_models.data.skill import Skill
from shared_modules.entity import (
    Address,
    ClientAccount,
    Consultant,
    NonBillableAccount,
    PersonalName,
)

INVOICE_DATE = date(2013, 4, 2)


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed invoice date."""
    return lambda: INVOICE_DATE


@pytest.fixture
def business():
    """Complete business identity of the invoicing company."""
    return ServiceProviderConfig(
        name="Small Consulting Group",
        street="1616 Index Ct.",
        city="Redmond",
        state="WA",
        zip_code="98055",
    )


@pytest.fixture
def client_account():
    return ClientAccount(
        name="Acme Industries",
        address=Address(street="3 Desert Rd.", city="Phoenix", state="AZ", zip_code="85001"),
        contact=PersonalName(last_name="Coyote", first_name="Wiley", middle_name="E."),
    )


@pytest.fixture
def other_client():
    return ClientAccount(
        name="Foogle",
        address=Address(street="1 Main St.", city="Seattle", state="WA", zip_code="98101"),
        contact=PersonalName(last_name="Page", first_name="Larry"),
    )


@pytest.fixture
def consultant():
    return Consultant(name=PersonalName(last_name="Coder", first_name="Carl"))


@pytest.fixture
def make_time_card(consultant):
    """Factory building a time card from (date, account, skill, hours) tuples."""

    def _make(entries, card_consultant=None):
        card = TimeCard(
            consultant=card_consultant or consultant,
            week_starting_day=entries[0][0] if entries else date(2013, 3, 4),
        )
        for entry_date, account, skill, hours in entries:
            card.add_consultant_time(
                ConsultantTime(date=entry_date, account=account, skill=skill, hours=hours)
            )
        return card

    return _make


@pytest.fixture
def mixed_time_card(make_time_card, client_account, other_client):
    """Time card spanning two clients, a non-billable account and two months."""
    return make_time_card(
        [
            (date(2013, 3, 4), client_account, Skill.SOFTWARE_ENGINEER, 8),
            (date(2013, 3, 5), other_client, Skill.SYSTEM_ARCHITECT, 6),
            (date(2013, 3, 6), NonBillableAccount.VACATION, Skill.SOFTWARE_ENGINEER, 8),
            (date(2013, 3, 7), client_account, Skill.PROJECT_MANAGER, 4),
            (date(2013, 4, 1), client_account, Skill.SOFTWARE_ENGINEER, 8),
        ]
    )


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru sinks bound to captured streams after each test."""
    yield
    logger.remove()
