"""
Tests for real-information detection.
"""
import pytest

from citedby.adapters.parsing import has_real_business_info


@pytest.mark.parametrize("response", [
    "KPMG AG, Badenerstrasse 172, 8004 Zürich.",
    "More at kpmg.ch.",
    "Call +41 58 249 31 31.",
    "Call 044 249 31 31.",
])
def test_contact_details_count_as_real_info(response):
    assert has_real_business_info(response, "KPMG AG")


def test_deflection_phrase_wins_over_contact_details():
    response = "I don't have details on this firm, but kpmg.ch might help."
    assert not has_real_business_info(response, "KPMG AG")


def test_knowledge_cutoff_is_a_deflection():
    response = "As of my knowledge cutoff, KPMG AG was based in Zürich."
    assert not has_real_business_info(response, "KPMG AG")


def test_short_filler_is_not_real_info():
    assert not has_real_business_info("KPMG AG is a firm in Zürich.", "KPMG AG")


def test_short_service_list_is_real_info():
    assert has_real_business_info("KPMG AG offers audit, tax, advisory", "KPMG AG")


def test_long_response_without_contact_details_is_real_info():
    response = "KPMG AG is one of the large audit firms active in Zürich. " * 5
    assert len(response) >= 200
    assert has_real_business_info(response, "KPMG AG")


def test_empty_response_has_no_info():
    assert not has_real_business_info("", "KPMG AG")
