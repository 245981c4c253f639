"""Subject for ISO-4217 currencies.

The value is a pycountry currency record; names, symbols and fraction digits
come from the CLDR data shipped with babel.
"""

from __future__ import annotations

from typing import Any

import pycountry
from babel import default_locale
from babel.numbers import get_currency_name, get_currency_precision, get_currency_symbol

from truthext.config import TruthConfig
from truthext.subjects.base import IntegerSubject, StringSubject, Subject, derivation_label

FALLBACK_LOCALE = "en_US"

# pycountry builds its record classes when a database is first loaded.
CURRENCY_TYPE = type(pycountry.currencies.get(alpha_3="EUR"))


class CurrencySubject(Subject[Any]):
    kind = "currency"

    def _locale(self, locale: str | None) -> str:
        return locale or self.config.default_locale or default_locale("LC_NUMERIC") or FALLBACK_LOCALE

    def currency_code(self) -> StringSubject:
        return self.derive("currency_code()", lambda c: c.alpha_3, StringSubject)

    def display_name(self, locale: str | None = None) -> StringSubject:
        """Name of the currency in *locale*, or in the configured default locale."""
        label = derivation_label("display_name", locale) if locale else "display_name()"
        resolved = self._locale(locale)
        return self.derive(label, lambda c: get_currency_name(c.alpha_3, locale=resolved), StringSubject)

    def symbol(self, locale: str | None = None) -> StringSubject:
        label = derivation_label("symbol", locale) if locale else "symbol()"
        resolved = self._locale(locale)
        return self.derive(label, lambda c: get_currency_symbol(c.alpha_3, locale=resolved), StringSubject)

    def numeric_code(self) -> IntegerSubject:
        return self.derive("numeric_code()", lambda c: int(c.numeric), IntegerSubject)

    def default_fraction_digits(self) -> IntegerSubject:
        return self.derive("default_fraction_digits()", lambda c: get_currency_precision(c.alpha_3), IntegerSubject)


def assert_that(actual: Any, *, config: TruthConfig | None = None) -> CurrencySubject:
    return CurrencySubject(actual, config=config)
