"""
Generic Term Filter
Words that are too common to identify a business on their own
"""

GENERIC_WORDS = frozenset([
    # Legal suffixes
    "ag", "gmbh", "sarl", "sa", "ltd", "llc", "inc", "co", "kg",
    # Industry terms (German/French/English)
    "treuhand", "notar", "notariat", "notaire", "anwalt", "avocat", "lawyer", "attorney",
    "zahnarzt", "dentist", "dentiste", "arzt", "doctor", "médecin", "praxis", "kanzlei",
    "immobilien", "immobilier", "real", "estate", "maison",
    "restaurant", "hotel", "gastro", "garage", "auto",
    "versicherung", "assurance", "insurance", "finance", "bank",
    "it", "software", "tech", "digital", "consulting", "beratung",
    # Locations
    "zürich", "zurich", "genf", "geneva", "genève", "basel", "bern", "lausanne",
    "schweiz", "switzerland", "suisse", "svizzera", "swiss",
    # Generic business terms
    "services", "solutions", "group", "partner", "partners", "team", "firma", "office",
    "büro", "bureau", "center", "centre", "professional", "expert",
])


def is_generic_word(word: str) -> bool:
    """True if the token cannot distinguish one business from another"""
    return word.lower() in GENERIC_WORDS
