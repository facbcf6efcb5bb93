from datetime import date

import pytest
from pydantic import ValidationError

from pydantic_models.data.consultant_time import ConsultantTime
from pydantic_models.data.invoice_line_item import InvoiceLineItem
from pydantic_models.data.skill import Skill
from shared_modules.entity import Address, NonBillableAccount, PersonalName
from shared_modules.state_code import StateCode
from shared_modules.utils import get_month_period


def test_address_text_and_state_normalization():
    address = Address(street="1616 Index Ct.", city="Redmond", state="wa", zip_code=98055)
    assert address.state is StateCode.WA
    assert address.zip_code == "98055"
    assert str(address) == "1616 Index Ct.\nRedmond, WA 98055"


def test_address_rejects_unknown_state():
    with pytest.raises(ValidationError):
        Address(street="1 Main St.", city="Nowhere", state="XX", zip_code="00000")


def test_personal_name_text():
    assert str(PersonalName(last_name="Coyote", first_name="Wiley", middle_name="E.")) == "Coyote, Wiley E."
    assert str(PersonalName(last_name="Coyote", first_name="Wiley")) == "Coyote, Wiley"
    assert str(PersonalName(last_name="Coyote")) == "Coyote"


def test_non_billable_accounts_are_never_billable():
    for account in NonBillableAccount:
        assert account.is_billable is False
    assert str(NonBillableAccount.SICK_LEAVE) == "Sick Leave"


def test_consultant_time_is_immutable_and_rejects_negative_hours(client_account):
    time = ConsultantTime(date=date(2013, 3, 4), account=client_account, skill=Skill.SOFTWARE_TESTER, hours=8)
    assert time.is_billable
    assert time.client_name == "Acme Industries"
    with pytest.raises(ValidationError):
        time.hours = 9
    with pytest.raises(ValidationError):
        ConsultantTime(date=date(2013, 3, 4), account=client_account, skill=Skill.SOFTWARE_TESTER, hours=-1)


def test_consultant_time_accepts_non_billable_account():
    time = ConsultantTime(
        date=date(2013, 3, 4), account=NonBillableAccount.VACATION, skill=Skill.UNKNOWN_SKILL, hours=8
    )
    assert not time.is_billable
    assert time.client_name == "Vacation"


@pytest.mark.parametrize(
    "skill, hours, expected",
    [
        (Skill.PROJECT_MANAGER, 2, 500.0),
        (Skill.SYSTEM_ARCHITECT, 3, 600.0),
        (Skill.SOFTWARE_ENGINEER, 8, 1200.0),
        (Skill.SOFTWARE_TESTER, 8, 800.0),
        (Skill.UNKNOWN_SKILL, 8, 0.0),
    ],
)
def test_line_item_charge_uses_skill_rate(consultant, skill, hours, expected):
    item = InvoiceLineItem(date=date(2013, 3, 4), consultant=consultant, skill=skill, hours=hours)
    assert item.charge == expected


@pytest.mark.parametrize(
    "month, year, start, end",
    [
        (0, 2013, date(2013, 1, 1), date(2013, 1, 31)),
        (1, 2013, date(2013, 2, 1), date(2013, 2, 28)),
        (1, 2012, date(2012, 2, 1), date(2012, 2, 29)),
        (3, 2013, date(2013, 4, 1), date(2013, 4, 30)),
        (11, 2013, date(2013, 12, 1), date(2013, 12, 31)),
    ],
)
def test_month_period_boundaries(month, year, start, end):
    period = get_month_period(month, year)
    assert (period.start, period.end) == (start, end)


@pytest.mark.parametrize("month", [-1, 12])
def test_month_period_rejects_invalid_month(month):
    with pytest.raises(ValueError):
        get_month_period(month, 2013)
