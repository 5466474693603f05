"""Finance data: chart of accounts, contracts, invoices, payments and ledger transactions."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def _d(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


FIN_ACCOUNTS = [
    {"id": "account-revenue-main", "name": "Service Revenue", "code": "4000", "type": "revenue", "currency": "USD"},
    {"id": "account-bank-main", "name": "Main Operating Account", "code": "1010", "type": "bank", "currency": "USD",
     "bankName": "National Bank of Egypt"},
    {"id": "account-expense-hardware", "name": "Hardware Purchases", "code": "5100", "type": "expense", "currency": "USD"},
    {"id": "account-expense-software", "name": "Software Licenses", "code": "5200", "type": "expense", "currency": "USD"},
    {"id": "account-expense-overhead", "name": "Office & Overhead", "code": "5300", "type": "expense", "currency": "USD"},
    {"id": "account-expense-payroll", "name": "Payroll", "code": "5400", "type": "expense", "currency": "USD"},
]


CONTRACTS = [
    {
        "id": "contract-dental-support-2024",
        "contractNumber": "CON-2024-001",
        "accountId": "account-dental-clinic",
        "projectId": "project-dental-support",
        "type": "support",
        "status": "active",
        "startDate": _d(2024, 1, 1),
        "endDate": _d(2024, 12, 31),
        "value": 24000,
        "currency": "USD",
        "billingFrequency": "quarterly",
        "slaPolicyId": "sla-standard-support",
        "autoRenew": True,
    },
    {
        "id": "contract-powergym-support",
        "contractNumber": "CON-2024-002",
        "accountId": "account-fitness-center",
        "type": "support",
        "status": "active",
        "startDate": _d(2024, 2, 1),
        "endDate": _d(2025, 1, 31),
        "value": 9600,
        "currency": "USD",
        "billingFrequency": "monthly",
        "slaPolicyId": "sla-premium-support",
        "autoRenew": True,
    },
    {
        "id": "contract-pizza-palace-development",
        "contractNumber": "CON-2024-003",
        "accountId": "account-pizza-palace",
        "projectId": "project-pizza-palace-expansion",
        "type": "development",
        "status": "draft",
        "startDate": _d(2024, 4, 1),
        "endDate": _d(2024, 9, 30),
        "value": 125000,
        "currency": "USD",
        "billingFrequency": "milestone",
        "autoRenew": False,
    },
]


def _line(description: str, quantity: int, unit_price: float, item_id: str | None = None) -> dict[str, Any]:
    line: dict[str, Any] = {
        "description": description,
        "quantity": quantity,
        "unitPrice": unit_price,
        "total": quantity * unit_price,
    }
    if item_id:
        line["itemId"] = item_id
    return line


def _invoice(invoice_id: str, number: str, account_id: str, status: str, issued: datetime,
             due: datetime, lines: list[dict[str, Any]], paid: float = 0.0, *,
             project_id: str | None = None, contract_id: str | None = None,
             tax_rate: float = 0.14) -> dict[str, Any]:
    subtotal = sum(line["total"] for line in lines)
    tax = round(subtotal * tax_rate, 2)
    total = subtotal + tax
    record: dict[str, Any] = {
        "id": invoice_id,
        "invoiceNumber": number,
        "accountId": account_id,
        "status": status,
        "issueDate": issued,
        "dueDate": due,
        "currency": "USD",
        "lineItems": lines,
        "subtotal": subtotal,
        "taxRate": tax_rate,
        "taxAmount": tax,
        "total": total,
        "paidAmount": paid,
        "balanceDue": round(total - paid, 2),
    }
    if project_id:
        record["projectId"] = project_id
    if contract_id:
        record["contractId"] = contract_id
    return record


INVOICES = [
    _invoice("invoice-golden-spoon-milestone1", "INV-2024-0001", "account-golden-spoon", "paid",
             _d(2024, 1, 30), _d(2024, 2, 29),
             [_line("Milestone 1: Discovery & Analysis", 1, 6750.0),
              _line("POS Terminal - Advanced", 3, 1200.0, "product-pos-terminal-advanced")],
             paid=11799.0, project_id="project-golden-spoon-pos"),
    _invoice("invoice-beauty-salon-final", "INV-2023-0042", "account-beauty-salon", "paid",
             _d(2023, 12, 15), _d(2023, 12, 30),
             [_line("Final Milestone: Go-Live", 1, 5400.0)],
             paid=6156.0, project_id="project-beauty-salon-pos"),
    _invoice("invoice-golden-spoon-milestone2", "INV-2024-0002", "account-golden-spoon", "partially_paid",
             _d(2024, 2, 20), _d(2024, 3, 21),
             [_line("Milestone 2: System Configuration", 1, 13500.0)],
             paid=7500.0, project_id="project-golden-spoon-pos"),
    _invoice("invoice-techstore-milestone1", "INV-2024-0003", "account-tech-store", "sent",
             _d(2024, 2, 15), _d(2024, 3, 16),
             [_line("Milestone 1: UX Research & Design", 1, 12000.0)],
             project_id="project-techstore-mobile"),
    _invoice("invoice-health-first-milestone3", "INV-2024-0004", "account-health-first", "draft",
             _d(2024, 3, 10), _d(2024, 4, 9),
             [_line("Milestone 3: Data Migration", 1, 7600.0)],
             project_id="project-health-first-pos"),
    _invoice("invoice-fashion-hub-overdue", "INV-2024-0005", "account-fashion-hub", "overdue",
             _d(2024, 1, 10), _d(2024, 1, 25),
             [_line("Barcode Scanner", 2, 180.0, "product-barcode-scanner"),
              _line("Retail POS Software - Annual", 1, 1200.0, "product-retail-pos-software")]),
    _invoice("invoice-dental-q1-2024", "INV-2024-0006", "account-dental-clinic", "paid",
             _d(2024, 1, 1), _d(2024, 1, 31),
             [_line("IT Support Q1 2024", 1, 6000.0, "service-technical-support")],
             paid=6840.0, project_id="project-dental-support", contract_id="contract-dental-support-2024"),
    _invoice("invoice-dental-q2-2024", "INV-2024-0007", "account-dental-clinic", "draft",
             _d(2024, 4, 1), _d(2024, 4, 30),
             [_line("IT Support Q2 2024", 1, 6000.0, "service-technical-support")],
             project_id="project-dental-support", contract_id="contract-dental-support-2024"),
    _invoice("invoice-powergym-feb-2024", "INV-2024-0008", "account-fitness-center", "paid",
             _d(2024, 2, 1), _d(2024, 2, 15),
             [_line("Premium Support - February", 1, 800.0, "service-technical-support")],
             paid=912.0, contract_id="contract-powergym-support"),
    _invoice("invoice-powergym-mar-2024", "INV-2024-0009", "account-fitness-center", "sent",
             _d(2024, 3, 1), _d(2024, 3, 15),
             [_line("Premium Support - March", 1, 800.0, "service-technical-support")],
             contract_id="contract-powergym-support"),
]


def _payment(payment_id: str, number: str, invoice_id: str, account_id: str, amount: float,
             method: str, status: str, paid_on: datetime, **gateway: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": payment_id,
        "paymentNumber": number,
        "invoiceId": invoice_id,
        "accountId": account_id,
        "amount": amount,
        "currency": "USD",
        "method": method,
        "status": status,
        "paymentDate": paid_on,
    }
    if gateway:
        record["gateway"] = gateway
    return record


PAYMENTS = [
    _payment("payment-golden-spoon-milestone1", "PAY-2024-0001", "invoice-golden-spoon-milestone1",
             "account-golden-spoon", 11799.0, "bank_transfer", "completed", _d(2024, 2, 20)),
    _payment("payment-beauty-salon-stripe", "PAY-2023-0038", "invoice-beauty-salon-final",
             "account-beauty-salon", 6156.0, "card", "completed", _d(2023, 12, 28),
             provider="stripe", chargeId="ch_3LvQa02eZvKYlo2C1234567"),
    _payment("payment-golden-spoon-partial", "PAY-2024-0002", "invoice-golden-spoon-milestone2",
             "account-golden-spoon", 7500.0, "card", "completed", _d(2024, 3, 5),
             provider="paymob", transactionId="PAYMOB_123456789"),
    _payment("payment-dental-q1", "PAY-2024-0003", "invoice-dental-q1-2024",
             "account-dental-clinic", 6840.0, "bank_transfer", "completed", _d(2024, 1, 25)),
    _payment("payment-powergym-feb", "PAY-2024-0004", "invoice-powergym-feb-2024",
             "account-fitness-center", 912.0, "card", "completed", _d(2024, 2, 10),
             provider="stripe", chargeId="ch_3LvQa02eZvKYlo2C7654321"),
    _payment("payment-techstore-pending", "PAY-2024-0005", "invoice-techstore-milestone1",
             "account-tech-store", 13680.0, "bank_transfer", "pending", _d(2024, 3, 14)),
    _payment("payment-fashion-failed", "PAY-2024-0006", "invoice-fashion-hub-overdue",
             "account-fashion-hub", 1778.4, "card", "failed", _d(2024, 1, 24),
             provider="stripe", chargeId="ch_3LvQa02eZvKYlo2C0000000", failureReason="card_declined"),
]


def _txn(txn_id: str, number: str, txn_type: str, amount: float, account_id: str,
         booked: datetime, description: str, **refs: str) -> dict[str, Any]:
    return {
        "id": txn_id,
        "transactionNumber": number,
        "type": txn_type,
        "amount": amount,
        "currency": "USD",
        "finAccountId": account_id,
        "date": booked,
        "description": description,
        **refs,
    }


TRANSACTIONS = [
    _txn("txn-golden-spoon-milestone1", "TXN-2024-0001", "income", 11799.0, "account-revenue-main",
         _d(2024, 2, 20), "Golden Spoon milestone 1 payment",
         projectId="project-golden-spoon-pos", paymentId="payment-golden-spoon-milestone1"),
    _txn("txn-beauty-salon-final", "TXN-2023-0120", "income", 6156.0, "account-revenue-main",
         _d(2023, 12, 28), "Glamour Salon final milestone payment",
         projectId="project-beauty-salon-pos", paymentId="payment-beauty-salon-stripe"),
    _txn("txn-golden-spoon-partial", "TXN-2024-0002", "income", 7500.0, "account-revenue-main",
         _d(2024, 3, 5), "Golden Spoon milestone 2 partial payment",
         projectId="project-golden-spoon-pos", paymentId="payment-golden-spoon-partial"),
    _txn("txn-hardware-purchase", "TXN-2024-0003", "expense", 4200.0, "account-expense-hardware",
         _d(2024, 1, 20), "POS terminals for Golden Spoon rollout",
         projectId="project-golden-spoon-pos"),
    _txn("txn-software-license", "TXN-2024-0004", "expense", 1500.0, "account-expense-software",
         _d(2024, 1, 5), "Annual development tooling licenses"),
    _txn("txn-office-rent", "TXN-2024-0005", "expense", 3500.0, "account-expense-overhead",
         _d(2024, 3, 1), "Office rent - March 2024"),
    _txn("txn-employee-salaries", "TXN-2024-0006", "expense", 48000.0, "account-expense-payroll",
         _d(2024, 2, 28), "Payroll - February 2024"),
    _txn("txn-bank-transfer", "TXN-2024-0007", "transfer", 10000.0, "account-bank-main",
         _d(2024, 3, 10), "Transfer to operating reserve"),
]
