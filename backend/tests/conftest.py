"""
Shared fixtures: canned LLM responses for the calibration dataset.
"""
import pytest

from citedby.services import CALIBRATION_BUSINESSES, VisibilityTier

# Partial forms used in direct answers for medium-visibility businesses
SHORT_NAMES = {
    "BDO AG": "BDO",
    "OBT AG": "OBT",
    "Walder Wyss AG": "Walder Wyss",
    "Hotel Schweizerhof": "Schweizerhof",
}

ADVERSARIAL_RESPONSES = {
    "Treuhand Zürich AG": {
        "local_search": (
            "Many Treuhand firms in Zürich offer bookkeeping and payroll.\n"
            "1. Alpha Revision\n2. Beta Kontor\n"
            "A Treuhand AG can also help with taxes."
        ),
        "direct_query": "I couldn't find that specific company.",
    },
    "Swiss Life Beratung": {
        "local_search": (
            "1. Swiss Life AG - large insurer with an office in Bern.\n"
            "2. Mobiliar - cooperative insurer."
        ),
        "direct_query": "Swiss Life AG offers life insurance and pension products.",
    },
}


def high_local(name: str, city: str) -> str:
    return (
        f"Here are my top picks in {city}:\n"
        f"1. {name} - Hauptstrasse 10, 8001 {city}. Highly recommended and trusted.\n"
        "2. Alpha Revision - also popular."
    )


def high_direct(name: str, city: str) -> str:
    return (
        f"{name} is one of the leading names in {city}. Highly recommended for its "
        "professional and reliable service. Website: www.example.ch"
    )


def medium_local(name: str, city: str) -> str:
    return (
        f"Here are a few firms to look at in {city}:\n"
        "1. Alpha Revision\n2. Beta Audit\n3. Gamma Partner\n4. Delta Finanz\n5. Epsilon Kontor\n"
        f"6. {name}\n"
        "I am not aware of more specific details about these firms."
    )


def medium_direct(short_name: str, city: str) -> str:
    return f"{short_name} is an established name in {city}."


def low_local(city: str) -> str:
    return (
        f"Here are some well-known options in {city}:\n"
        "1. Alpha Revision\n2. Beta Kontor\n3. Gamma Consulting"
    )


LOW_DIRECT = "I don't have information about that business."


@pytest.fixture
def simulated_responses():
    """Recorded responses for every calibration business, shaped like real answers per tier"""
    responses = {}
    for business in CALIBRATION_BUSINESSES:
        name, city = business.name, business.city
        if name in ADVERSARIAL_RESPONSES:
            responses[name] = ADVERSARIAL_RESPONSES[name]
        elif business.expected_visibility == VisibilityTier.HIGH:
            responses[name] = {
                "local_search": high_local(name, city),
                "direct_query": high_direct(name, city),
            }
        elif business.expected_visibility == VisibilityTier.MEDIUM:
            responses[name] = {
                "local_search": medium_local(name, city),
                "direct_query": medium_direct(SHORT_NAMES[name], city),
            }
        else:
            responses[name] = {
                "local_search": low_local(city),
                "direct_query": LOW_DIRECT,
            }
    return responses


@pytest.fixture
def kpmg_response():
    return "1. KPMG AG - Bahnhofstrasse 10, 8001 Zürich. Highly recommended, experienced team."
