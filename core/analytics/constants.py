"""
Constants for learning insights: module titles and recommendation texts.
"""

from __future__ import annotations

from typing import Final


LOW_PERCENT_BELOW: Final[int] = 70   # < 70% correct -> "low" recommendation
MID_PERCENT_BELOW: Final[int] = 90   # < 90% correct -> "mid" recommendation

DEFAULT_RECOMMENDATION: Final[str] = "Weiter üben."

MODULE_TITLES: Final[dict[str, str]] = {
    "objection-handling": "Einwandbehandlung",
    "question-techniques": "Fragetechniken",
    "sales-psychology": "Verkaufspsychologie",
    "sales-language": "Verkaufssprache",
    "practice-quiz-einwaende": "Adaptives Quiz (Einwände)",
    "practice-quiz-fragen": "Adaptives Quiz (Fragen)",
    "practice-flashcards": "Karteikarten",
    "practice-rollenspiel": "Rollenspiel",
    "practice-micro-einwaende": "Mikro-Learning (Einwände)",
    "practice-micro-spin": "Mikro-Learning (SPIN)",
}

MODULE_RECOMMENDATIONS: Final[dict[str, dict[str, str]]] = {
    "objection-handling": {
        "low": "Wiederhole Modul „Preis-Einwände\" in 2 Tagen",
        "mid": "Fokus auf „Konkurrenz-Einwände\"",
        "high": "Weiter mit „Funnel-Fragen – Fortgeschritten\"",
    },
    "question-techniques": {
        "low": "Wiederhole „SPIN-Selling\" und „BANT-Qualifizierung\"",
        "mid": "Fokus auf „Offene vs. geschlossene Fragen\"",
        "high": "Weiter mit „Funnel-Fragen – Fortgeschritten\"",
    },
    "sales-psychology": {
        "low": "Wiederhole Grundlagen „DISC\" und „Reziprozität\"",
        "mid": "Fokus auf „Reziprozität in B2B\"",
        "high": "Weiter mit „Knappheit und sozialer Beweis\"",
    },
    "sales-language": {
        "low": "Wiederhole „Professionelle Formulierungen\"",
        "mid": "Fokus auf „Wert-Kommunikation\"",
        "high": "Weiter mit „Abschluss-Formulierungen\"",
    },
    "practice-quiz-einwaende": {
        "low": "Wiederhole Einwandbehandlung im Vertriebs-Training",
        "mid": "Mehr Übung im Adaptiven Quiz „Einwände\"",
        "high": "Weiter mit Fragetechniken oder Rollenspiel",
    },
    "practice-quiz-fragen": {
        "low": "Wiederhole Fragetechniken im Vertriebs-Training",
        "mid": "Mehr Übung im Adaptiven Quiz „Fragen\"",
        "high": "Weiter mit Einwandbehandlung oder Mikro-Learning",
    },
    "practice-flashcards": {
        "low": "Karteikarten häufiger durchgehen, Schwer-Karten wiederholen",
        "mid": "Schwer bewertete Karten gezielt üben",
        "high": "Weiter mit Quiz oder Rollenspiel",
    },
}

INSIGHT_COLUMNS: Final[list[str]] = [
    "module_id",
    "title",
    "correct_answers",
    "total_answers",
    "percentage_correct",
    "recommendation",
]
