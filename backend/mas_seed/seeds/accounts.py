"""Client accounts and their physical sites."""

from __future__ import annotations

from typing import Any


def _address(street: str, city: str = "Cairo", state: str = "Cairo Governorate",
             postal_code: str = "11511") -> dict[str, str]:
    return {
        "street": street,
        "city": city,
        "state": state,
        "country": "Egypt",
        "postalCode": postal_code,
    }


def _account(
    account_id: str,
    name: str,
    industry: str,
    tier: str,
    address: dict[str, str],
    *,
    assigned_to: str = "user-sales-lead",
    credit_limit: int = 50000,
    payment_terms: int = 30,
    account_type: str = "customer",
    **custom: Any,
) -> dict[str, Any]:
    return {
        "id": account_id,
        "name": name,
        "type": account_type,
        "tier": tier,
        "industry": industry,
        "assignedTo": assigned_to,
        "address": {"billing": address, "shipping": dict(address)},
        "creditLimit": credit_limit,
        "paymentTerms": payment_terms,
        "customFields": custom,
    }


ACCOUNTS = [
    _account("account-golden-spoon", "Golden Spoon Restaurant", "Food & Beverage", "gold",
             _address("15 Tahrir Square"), credit_limit=100000,
             numberOfLocations=3, primaryCuisine="Middle Eastern"),
    _account("account-pizza-palace", "Pizza Palace Chain", "Food & Beverage", "platinum",
             _address("45 Nasr City Road"), credit_limit=250000, payment_terms=45,
             numberOfLocations=12),
    _account("account-tech-store", "TechStore Electronics", "Retail", "gold",
             _address("22 Mohandessin Street", city="Giza", state="Giza Governorate", postal_code="12411"),
             assigned_to="user-sales-rep1", credit_limit=75000),
    _account("account-fashion-hub", "Fashion Hub Boutique", "Retail", "silver",
             _address("8 Zamalek Avenue"), assigned_to="user-sales-rep1", payment_terms=15),
    _account("account-health-first", "HealthFirst Pharmacy", "Healthcare", "gold",
             _address("31 Heliopolis Square"), credit_limit=80000, numberOfLocations=2),
    _account("account-dental-clinic", "Smile Dental Clinic", "Healthcare", "silver",
             _address("12 Maadi Corniche"), credit_limit=30000),
    _account("account-beauty-salon", "Glamour Beauty Salon", "Beauty & Wellness", "bronze",
             _address("5 New Cairo Mall"), credit_limit=20000, payment_terms=15),
    _account("account-fitness-center", "PowerGym Fitness Center", "Fitness", "gold",
             _address("60 Sheikh Zayed Road", city="Giza", state="Giza Governorate", postal_code="12588"),
             assigned_to="user-sales-rep1", numberOfLocations=2),
]


def _site(site_id: str, account_id: str, name: str, address: dict[str, str],
          contact: str, phone: str) -> dict[str, Any]:
    return {
        "id": site_id,
        "accountId": account_id,
        "name": name,
        "address": address,
        "contactPerson": contact,
        "contactPhone": phone,
        "timezone": "Africa/Cairo",
        "active": True,
    }


CLIENT_SITES = [
    _site("site-golden-spoon-main", "account-golden-spoon", "Golden Spoon - Main Branch",
          _address("15 Tahrir Square"), "Hassan Al-Rashid", "+20-10-2345-6789"),
    _site("site-golden-spoon-branch1", "account-golden-spoon", "Golden Spoon - Zamalek Branch",
          _address("78 Zamalek Street"), "Mona Saleh", "+20-10-2345-6790"),
    _site("site-pizza-palace-hq", "account-pizza-palace", "Pizza Palace - Headquarters",
          _address("45 Nasr City Road"), "Omar Franchise Director", "+20-10-3456-1111"),
    _site("site-health-first-main", "account-health-first", "HealthFirst - Heliopolis",
          _address("31 Heliopolis Square"), "Dr. Amr Khalil", "+20-10-4567-2222"),
    _site("site-powergym-main", "account-fitness-center", "PowerGym - Sheikh Zayed",
          _address("60 Sheikh Zayed Road", city="Giza", state="Giza Governorate", postal_code="12588"),
          "Mahmoud Fitness Manager", "+20-10-5678-3333"),
]
