from datetime import date

from invoices.modules.invoice import Invoice
from invoices.modules.invoice_writer import invoice_file_name, write_invoice
from pydantic_models.data.skill import Skill


def test_write_invoice(tmp_path, client_account, business, fixed_clock, make_time_card):
    invoice = Invoice(client_account, 2, 2013, business=business, clock=fixed_clock)
    invoice.extract_line_items(
        make_time_card([(date(2013, 3, 4), client_account, Skill.SOFTWARE_ENGINEER, 8)])
    )

    target = write_invoice(invoice, tmp_path / "output")

    assert target.name == "invoice_Acme_Industries_2013_03.txt"
    assert target.read_text(encoding="utf-8") == invoice.render()


def test_invoice_file_name_for_december(client_account, business):
    invoice = Invoice(client_account, 11, 2012, business=business)
    assert invoice_file_name(invoice) == "invoice_Acme_Industries_2012_12.txt"
