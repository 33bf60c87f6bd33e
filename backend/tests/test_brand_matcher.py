"""
Tests for business name matching, list positions and competitor extraction.
"""
from citedby.adapters.parsing import (
    BrandMatcher,
    analyze_name_mention,
    extract_competitors,
    find_position_in_list,
    is_generic_word,
)
from citedby.models import MentionType


def test_generic_words_are_case_insensitive():
    assert is_generic_word("Treuhand")
    assert is_generic_word("GMBH")
    assert is_generic_word("zürich")
    assert not is_generic_word("kpmg")


def test_exact_match_is_case_insensitive():
    mention = analyze_name_mention("We suggest kpmg ag for audits.", "KPMG AG")
    assert mention.mentioned
    assert mention.mention_type == MentionType.EXACT


def test_position_from_numbered_list():
    response = "1. Firma A\n2. Firma B\n3. Target Firma"
    assert find_position_in_list(response, "Target Firma") == 3

    mention = analyze_name_mention(response, "Target Firma")
    assert mention.mention_type == MentionType.EXACT
    assert mention.position == 3


def test_numbered_list_accepts_parenthesis_and_colon():
    assert find_position_in_list("1) Alpha\n2) Target", "target") == 2
    assert find_position_in_list("4: Target", "target") == 4


def test_large_list_number_is_taken_literally():
    response = "\n".join(f"{i}. Firm {i}" for i in range(1, 12)) + "\n12. Target Kanzlei"
    assert find_position_in_list(response, "target kanzlei") == 12


def test_unnumbered_line_position_is_estimated_and_capped():
    assert find_position_in_list("Options:\n- Alpha\n- Target Firm", "target firm") == 3
    response = "\n".join(["intro"] * 6) + "\nTarget Firm is also around."
    assert find_position_in_list(response, "target firm") == 5


def test_list_number_zero_falls_back_to_line_estimate():
    assert find_position_in_list("Intro\n0. Target Firm", "target firm") == 2


def test_position_none_when_term_absent():
    assert find_position_in_list("1. Alpha\n2. Beta", "gamma") is None
    assert find_position_in_list("1. Alpha", "") is None


def test_generic_only_name_is_not_matched():
    response = (
        "There are many Treuhand firms in Zürich. "
        "A good Treuhand AG can help with accounting."
    )
    mention = analyze_name_mention(response, "Treuhand Zürich AG")
    assert not mention.mentioned
    assert mention.mention_type == MentionType.NONE
    assert mention.position is None


def test_similar_big_brand_does_not_match():
    mention = analyze_name_mention("Swiss Life AG offers insurance in Bern.", "Swiss Life Beratung")
    assert not mention.mentioned


def test_swiss_counts_as_generic():
    assert is_generic_word("Swiss")
    assert analyze_name_mention("Visit Swiss Dental Center in Bern.", "Swiss Dental Center").mention_type == MentionType.EXACT
    assert not analyze_name_mention("Swiss Dental offers implants.", "Swiss Dental Center").mentioned


def test_short_name_partial_match_on_distinctive_word():
    mention = analyze_name_mention("For a notary in Aarau, Hartmann is experienced.", "Hartmann Notar")
    assert mention.mentioned
    assert mention.mention_type == MentionType.PARTIAL
    assert mention.position == 1


def test_short_name_words_must_be_close_together():
    close = analyze_name_mention("Walder and Wyss advise on mergers.", "Walder Wyss")
    assert close.mention_type == MentionType.PARTIAL

    far = analyze_name_mention(
        "Walder works in banking." + " " * 60 + "Wyss works in litigation.",
        "Walder Wyss",
    )
    assert not far.mentioned


def test_short_name_requires_every_significant_word():
    mention = analyze_name_mention("Walder is a lawyer.", "Walder Wyss")
    assert not mention.mentioned


def test_long_name_partial_match_needs_two_significant_words():
    name = "Zahnarztpraxis Dr. Schneider"
    mention = analyze_name_mention("Line one\nDr. Schneider treats patients in Winterthur.", name)
    assert mention.mention_type == MentionType.PARTIAL
    assert mention.position == 2

    assert not analyze_name_mention("Schneider is a common surname.", name).mentioned


def test_long_name_with_single_distinctive_word_never_partially_matches():
    mention = analyze_name_mention("Müller is a popular accountant.", "Müller Treuhand GmbH")
    assert not mention.mentioned


def test_empty_inputs_are_not_mentioned():
    assert not analyze_name_mention("", "KPMG AG").mentioned
    assert not analyze_name_mention("KPMG AG is great", "").mentioned
    assert not analyze_name_mention("KPMG AG is great", "   ").mentioned


def test_analysis_is_deterministic():
    response = "1. Firma A\n2. Target Firma"
    assert analyze_name_mention(response, "Target Firma") == analyze_name_mention(response, "Target Firma")


def test_custom_proximity_window():
    matcher = BrandMatcher(proximity_window=5)
    assert not matcher.analyze("Walder and Wyss advise.", "Walder Wyss").mentioned


def test_extract_competitors_skips_own_business():
    response = "You could try Muster AG or Weber & Partner. KPMG AG is also good."
    assert extract_competitors(response, "KPMG AG") == ["Muster AG", "Weber & Partner"]
    assert extract_competitors(response, "Muster AG") == ["Weber & Partner"]


def test_extract_competitors_is_capped():
    response = " ".join(f"{name} AG" for name in ["Alpha", "Bravo", "Charlie", "Delta", "Echo", "Foxtrot"])
    assert len(extract_competitors(response, "KPMG AG")) == 5
