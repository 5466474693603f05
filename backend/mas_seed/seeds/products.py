"""Product catalogue: hardware and software products, services, bundles, pricing and stock."""

from __future__ import annotations

from typing import Any


def _product(product_id: str, sku: str, name: str, category: str, price: float, cost: float,
             *, kind: str = "hardware", **extra: Any) -> dict[str, Any]:
    return {
        "id": product_id,
        "sku": sku,
        "name": name,
        "type": kind,
        "category": category,
        "price": price,
        "cost": cost,
        "currency": "USD",
        "taxable": True,
        "active": True,
        **extra,
    }


HARDWARE_PRODUCTS = [
    _product("product-pos-terminal-basic", "HW-POS-001", "POS Terminal - Basic", "terminals", 850.0, 520.0,
             warrantyMonths=12),
    _product("product-pos-terminal-advanced", "HW-POS-002", "POS Terminal - Advanced", "terminals", 1200.0, 760.0,
             warrantyMonths=24),
    _product("product-tablet-pos", "HW-POS-003", "Tablet POS Kit", "terminals", 650.0, 410.0, warrantyMonths=12),
    _product("product-thermal-printer", "HW-PRN-001", "Thermal Receipt Printer", "peripherals", 220.0, 130.0,
             warrantyMonths=12),
    _product("product-cash-drawer", "HW-CSH-001", "Cash Drawer", "peripherals", 140.0, 80.0, warrantyMonths=12),
    _product("product-barcode-scanner", "HW-SCN-001", "Barcode Scanner", "peripherals", 180.0, 95.0,
             warrantyMonths=12),
]

DIGITAL_PRODUCTS = [
    _product("product-restaurant-pos-software", "SW-POS-REST", "Restaurant POS Software", "software",
             1500.0, 0.0, kind="digital", licenseType="annual", maxTerminals=5),
    _product("product-retail-pos-software", "SW-POS-RETL", "Retail POS Software", "software",
             1200.0, 0.0, kind="digital", licenseType="annual", maxTerminals=5),
    _product("product-pharmacy-pos-software", "SW-POS-PHRM", "Pharmacy POS Software", "software",
             1800.0, 0.0, kind="digital", licenseType="annual", maxTerminals=3),
]

PRODUCTS = HARDWARE_PRODUCTS + DIGITAL_PRODUCTS


def _service(service_id: str, code: str, name: str, category: str, rate: float, unit: str,
             department_id: str) -> dict[str, Any]:
    return {
        "id": service_id,
        "code": code,
        "name": name,
        "category": category,
        "rate": rate,
        "unit": unit,
        "currency": "USD",
        "departmentId": department_id,
        "active": True,
    }


SERVICES = [
    _service("service-pos-implementation", "SRV-IMP", "POS Implementation", "implementation", 95.0, "hour", "dept-pos"),
    _service("service-data-migration", "SRV-MIG", "Data Migration", "implementation", 85.0, "hour", "dept-pos"),
    _service("service-staff-training", "SRV-TRN", "Staff Training", "training", 400.0, "session", "dept-pos"),
    _service("service-technical-support", "SRV-SUP", "Technical Support", "support", 800.0, "month", "dept-support"),
    _service("service-system-maintenance", "SRV-MNT", "System Maintenance", "support", 250.0, "visit", "dept-support"),
    _service("service-emergency-support", "SRV-EMG", "Emergency Support", "support", 150.0, "hour", "dept-support"),
    _service("service-business-analysis", "SRV-BA", "Business Analysis", "consulting", 110.0, "hour", "dept-pos"),
    _service("service-system-integration", "SRV-INT", "System Integration", "development", 120.0, "hour", "dept-tech"),
    _service("service-mobile-app-dev", "SRV-MOB", "Mobile App Development", "development", 100.0, "hour", "dept-tech"),
]


def _component(item_id: str, quantity: int, kind: str = "product") -> dict[str, Any]:
    return {"itemId": item_id, "itemType": kind, "quantity": quantity}


BUNDLES = [
    {
        "id": "bundle-restaurant-starter",
        "name": "Restaurant Starter Package",
        "components": [
            _component("product-pos-terminal-advanced", 2),
            _component("product-thermal-printer", 2),
            _component("product-cash-drawer", 1),
            _component("product-restaurant-pos-software", 1),
            _component("service-pos-implementation", 40, "service"),
            _component("service-staff-training", 2, "service"),
        ],
        "price": 9500.0,
        "currency": "USD",
        "active": True,
    },
    {
        "id": "bundle-retail-professional",
        "name": "Retail Professional Package",
        "components": [
            _component("product-pos-terminal-basic", 3),
            _component("product-barcode-scanner", 3),
            _component("product-thermal-printer", 3),
            _component("product-retail-pos-software", 1),
            _component("service-data-migration", 16, "service"),
        ],
        "price": 8200.0,
        "currency": "USD",
        "active": True,
    },
    {
        "id": "bundle-pharmacy-complete",
        "name": "Pharmacy Complete Solution",
        "components": [
            _component("product-pos-terminal-advanced", 2),
            _component("product-barcode-scanner", 2),
            _component("product-pharmacy-pos-software", 1),
            _component("service-system-integration", 24, "service"),
            _component("service-technical-support", 3, "service"),
        ],
        "price": 10400.0,
        "currency": "USD",
        "active": True,
    },
]


PRICEBOOKS = [
    {"id": "pricebook-standard-usd", "name": "Standard Pricing", "currency": "USD", "isDefault": True, "active": True},
    {"id": "pricebook-partner-discount", "name": "Partner Pricing", "currency": "USD", "isDefault": False,
     "discountPercent": 15, "active": True},
    {"id": "pricebook-volume-discount", "name": "Volume Pricing", "currency": "USD", "isDefault": False,
     "minimumQuantity": 10, "active": True},
]


def _price(entry_id: str, pricebook_id: str, item_id: str, unit_price: float,
           kind: str = "product") -> dict[str, Any]:
    return {
        "id": entry_id,
        "pricebookId": pricebook_id,
        "itemId": item_id,
        "itemType": kind,
        "unitPrice": unit_price,
        "active": True,
    }


PRICEBOOK_ENTRIES = [
    _price("price-pos-basic-std", "pricebook-standard-usd", "product-pos-terminal-basic", 850.0),
    _price("price-pos-advanced-std", "pricebook-standard-usd", "product-pos-terminal-advanced", 1200.0),
    _price("price-tablet-pos-std", "pricebook-standard-usd", "product-tablet-pos", 650.0),
    _price("price-printer-std", "pricebook-standard-usd", "product-thermal-printer", 220.0),
    _price("price-cash-drawer-std", "pricebook-standard-usd", "product-cash-drawer", 140.0),
    _price("price-scanner-std", "pricebook-standard-usd", "product-barcode-scanner", 180.0),
    _price("price-restaurant-software-std", "pricebook-standard-usd", "product-restaurant-pos-software", 1500.0),
    _price("price-retail-software-std", "pricebook-standard-usd", "product-retail-pos-software", 1200.0),
    _price("price-pharmacy-software-std", "pricebook-standard-usd", "product-pharmacy-pos-software", 1800.0),
    _price("price-implementation-std", "pricebook-standard-usd", "service-pos-implementation", 95.0, "service"),
    _price("price-data-migration-std", "pricebook-standard-usd", "service-data-migration", 85.0, "service"),
    _price("price-training-std", "pricebook-standard-usd", "service-staff-training", 400.0, "service"),
    _price("price-support-std", "pricebook-standard-usd", "service-technical-support", 800.0, "service"),
    _price("price-pos-basic-partner", "pricebook-partner-discount", "product-pos-terminal-basic", 722.5),
    _price("price-pos-advanced-partner", "pricebook-partner-discount", "product-pos-terminal-advanced", 1020.0),
]


def _stock(inventory_id: str, product_id: str, quantity: int, reorder_level: int,
           reserved: int = 0) -> dict[str, Any]:
    return {
        "id": inventory_id,
        "productId": product_id,
        "warehouse": "Cairo Main Warehouse",
        "quantity": quantity,
        "reserved": reserved,
        "available": quantity - reserved,
        "reorderLevel": reorder_level,
    }


INVENTORY = [
    _stock("inv-pos-basic-main", "product-pos-terminal-basic", 25, 5, reserved=3),
    _stock("inv-pos-advanced-main", "product-pos-terminal-advanced", 12, 4, reserved=2),
    _stock("inv-tablet-main", "product-tablet-pos", 18, 5),
    _stock("inv-printer-main", "product-thermal-printer", 40, 10, reserved=5),
    _stock("inv-cash-drawer-main", "product-cash-drawer", 22, 6),
    _stock("inv-scanner-main", "product-barcode-scanner", 3, 8),
]
