"""Bundled Marathi letter catalog.

Strokes are SVG path data in a 0-100 square with y growing downwards. The
headline (shirorekha) is traced last, as children are taught to draw it.
"""

from typing import Any

_HEADLINE = "M 18,25 L 82,25"

VOWELS: list[dict[str, Any]] = [
    {
        "id": "a",
        "label": "अ",
        "phoneme": "अ",
        "category": "vowel",
        "strokes": [
            "M 28,36 C 44,28 52,44 38,51 C 52,55 52,72 33,73",
            "M 42,52 L 62,52",
            "M 62,25 L 62,82",
            _HEADLINE,
        ],
    },
    {
        "id": "aa",
        "label": "आ",
        "phoneme": "आ",
        "category": "vowel",
        "strokes": [
            "M 22,36 C 38,28 46,44 32,51 C 46,55 46,72 27,73",
            "M 36,52 L 56,52",
            "M 56,25 L 56,82",
            "M 74,25 L 74,82",
            "M 14,25 L 86,25",
        ],
    },
    {
        "id": "i",
        "label": "इ",
        "phoneme": "इ",
        "category": "vowel",
        "strokes": [
            "M 34,34 C 60,30 60,50 44,55 C 66,58 64,82 38,80",
            _HEADLINE,
        ],
    },
    {
        "id": "u",
        "label": "उ",
        "phoneme": "उ",
        "category": "vowel",
        "strokes": [
            "M 30,35 C 56,30 60,50 40,55 C 70,60 66,86 45,80",
            _HEADLINE,
        ],
    },
    {
        "id": "e",
        "label": "ए",
        "phoneme": "ए",
        "category": "vowel",
        "strokes": [
            "M 56,25 L 36,50 C 50,44 66,56 54,72",
            _HEADLINE,
        ],
    },
]

CONSONANTS: list[dict[str, Any]] = [
    {
        "id": "ka",
        "label": "क",
        "phoneme": "क",
        "category": "consonant",
        "strokes": [
            "M 50,25 L 50,85",
            "M 50,52 C 30,36 24,62 50,56",
            "M 50,56 C 76,62 76,40 60,45",
            _HEADLINE,
        ],
    },
    {
        "id": "ga",
        "label": "ग",
        "phoneme": "ग",
        "category": "consonant",
        "strokes": [
            "M 36,25 L 36,62",
            "M 62,25 L 62,85",
            _HEADLINE,
        ],
    },
    {
        "id": "ja",
        "label": "ज",
        "phoneme": "ज",
        "category": "consonant",
        "strokes": [
            "M 34,35 C 50,34 50,50 38,55 C 50,60 56,70 40,76",
            "M 44,55 L 64,55",
            "M 64,25 L 64,85",
            _HEADLINE,
        ],
    },
    {
        "id": "ta",
        "label": "त",
        "phoneme": "त",
        "category": "consonant",
        "strokes": [
            "M 28,44 C 38,62 54,60 62,50",
            "M 62,25 L 62,85",
            _HEADLINE,
        ],
    },
    {
        "id": "na",
        "label": "न",
        "phoneme": "न",
        "category": "consonant",
        "strokes": [
            "M 34,36 L 34,50 C 40,58 54,56 62,50",
            "M 62,25 L 62,85",
            _HEADLINE,
        ],
    },
    {
        "id": "pa",
        "label": "प",
        "phoneme": "प",
        "category": "consonant",
        "strokes": [
            "M 34,25 L 34,50 C 40,58 54,56 62,50",
            "M 62,25 L 62,85",
            _HEADLINE,
        ],
    },
    {
        "id": "ma",
        "label": "म",
        "phoneme": "म",
        "category": "consonant",
        "strokes": [
            "M 28,25 L 28,50 C 30,58 44,58 48,50",
            "M 48,25 L 48,50",
            "M 68,25 L 68,85",
            _HEADLINE,
        ],
    },
    {
        "id": "ra",
        "label": "र",
        "phoneme": "र",
        "category": "consonant",
        "strokes": [
            "M 34,30 C 56,34 56,50 40,55 L 62,76",
            "M 24,25 L 70,25",
        ],
    },
    {
        "id": "la",
        "label": "ल",
        "phoneme": "ल",
        "category": "consonant",
        "strokes": [
            "M 40,35 C 24,40 30,62 42,55 C 50,52 55,48 62,50",
            "M 62,25 L 62,85",
            _HEADLINE,
        ],
    },
]

MARATHI_LETTERS: list[dict[str, Any]] = VOWELS + CONSONANTS
