"""Canned writing hints shown under the entry composer."""

SERVER_HINT = (
    "Möchten Sie Details zu den Server-Spezifikationen oder "
    "durchgeführten Updates hinzufügen?"
)
CUSTOMER_HINT = (
    "Vergessen Sie nicht, relevante Kontaktpersonen und Ticketnummern zu erwähnen."
)
GENERIC_HINT = (
    "Tipp: Fügen Sie konkrete Zeitangaben und beteiligte Personen hinzu, "
    "um den Eintrag nachvollziehbarer zu machen."
)


def suggest(text: str, min_length: int = 10) -> str | None:
    """Return a hint for a draft entry, or None while the draft is short.

    Keywords are matched case-sensitively; ``Server`` wins over ``Kunde``.
    """
    if len(text) <= min_length:
        return None
    if "Server" in text:
        return SERVER_HINT
    if "Kunde" in text:
        return CUSTOMER_HINT
    return GENERIC_HINT
