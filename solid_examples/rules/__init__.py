from .loader import DEFAULT_RULES_PATH, invoice_rates_from_rules, load_rules
from .models import (
    InvoiceCountryRules,
    LoggingRules,
    PaymentsRules,
    ProjectRules,
    Rules,
)

__all__ = [
    "DEFAULT_RULES_PATH",
    "InvoiceCountryRules",
    "LoggingRules",
    "PaymentsRules",
    "ProjectRules",
    "Rules",
    "invoice_rates_from_rules",
    "load_rules",
]
