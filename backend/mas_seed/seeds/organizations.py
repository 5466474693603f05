"""Organization and organization-settings seed records."""

ORGANIZATIONS = [
    {
        "id": "mas-hub-org",
        "name": "MAS Business Solutions",
        "logo": "https://storage.googleapis.com/mashub-assets/logos/mas-logo.png",
        "website": "https://mas.business",
        "baseCurrency": "USD",
        "timezone": "Africa/Cairo",
        "languages": ["en", "ar", "ru"],
        "defaultLanguage": "en",
        "fiscalYearStart": 1,
        "taxId": "EG123456789",
        "registrationNumber": "CR-2020-MAS-001",
        "address": {
            "street": "123 Business District",
            "city": "Cairo",
            "state": "Cairo Governorate",
            "country": "Egypt",
            "postalCode": "11511",
        },
    },
]

SETTINGS = [
    {
        "id": "mas-hub-settings",
        "organizationId": "mas-hub-org",
        "modules": {
            "projects": True,
            "finance": True,
            "crm": True,
            "support": True,
            "lms": True,
            "hr": True,
            "assets": True,
            "portals": True,
            "automations": True,
        },
        "features": {
            "multiCurrency": True,
            "multiLanguage": True,
            "approvalWorkflows": True,
            "customFields": True,
            "voipIntegration": False,
            "eSignature": False,
        },
        "integrations": {
            "stripe": {"enabled": True, "publicKey": "pk_test_demo_key"},
            "paymob": {"enabled": True, "merchantId": "demo_merchant"},
            "slack": {
                "enabled": True,
                "webhookUrl": "https://hooks.slack.com/services/demo/webhook",
            },
            "github": {"enabled": True, "organization": "a7mdelbanna"},
        },
    },
]
