"""Structural validation of the ground truth evaluation dataset.

These tests run without any AWS credentials and without invoking the agent.
They assert that the dataset itself is internally consistent and meets the
minimum quality bar required before the evaluation suite is meaningful.
"""

import re

import pytest

from tests.evaluation.ground_truth import EDD_TOOL, GROUND_TRUTH, WOA_TOOL

DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}")
ISO_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


@pytest.mark.evaluation
class TestGroundTruthDatasetSize:
    """The dataset must be large enough to produce statistically meaningful scores."""

    def test_dataset_meets_minimum_size(self) -> None:
        assert len(GROUND_TRUTH) >= 40, (
            f"Ground truth has {len(GROUND_TRUTH)} cases, minimum is 40."
        )

    def test_all_case_ids_are_unique(self) -> None:
        ids = [c.case_id for c in GROUND_TRUTH]
        assert len(ids) == len(set(ids)), "Duplicate case_id values found in GROUND_TRUTH."

    def test_all_case_ids_are_non_empty_strings(self) -> None:
        for case in GROUND_TRUTH:
            assert isinstance(case.case_id, str) and case.case_id.strip(), (
                f"case_id must be a non-empty string, got {case.case_id!r}."
            )


@pytest.mark.evaluation
class TestGroundTruthCategoryDistribution:
    """All four required categories must be present and adequately represented."""

    REQUIRED_CATEGORIES = {"happy_path", "edge_case", "out_of_scope", "adversarial"}

    def test_all_four_categories_present(self) -> None:
        categories = {c.category for c in GROUND_TRUTH}
        missing = self.REQUIRED_CATEGORIES - categories
        assert not missing, f"Missing categories: {missing}"

    def test_category_values_are_valid(self) -> None:
        for case in GROUND_TRUTH:
            assert case.category in self.REQUIRED_CATEGORIES, (
                f"{case.case_id}: unknown category {case.category!r}."
            )

    @pytest.mark.parametrize(
        "category, minimum",
        [("happy_path", 10), ("edge_case", 5), ("out_of_scope", 5), ("adversarial", 5)],
    )
    def test_minimum_cases_per_category(self, category: str, minimum: int) -> None:
        count = sum(1 for c in GROUND_TRUTH if c.category == category)
        assert count >= minimum, f"Only {count} {category} cases, minimum is {minimum}."


@pytest.mark.evaluation
class TestGroundTruthRefusalConsistency:
    """Refusal-related fields must be internally consistent across every case."""

    def test_refusal_cases_have_no_expected_tool(self) -> None:
        for case in GROUND_TRUTH:
            if case.should_refuse:
                assert case.expected_tool is None, (
                    f"{case.case_id}: should_refuse=True but expected_tool={case.expected_tool!r}."
                )

    def test_out_of_scope_cases_all_marked_should_refuse(self) -> None:
        for case in GROUND_TRUTH:
            if case.category == "out_of_scope":
                assert case.should_refuse, (
                    f"{case.case_id}: category='out_of_scope' but should_refuse=False."
                )

    def test_adversarial_cases_without_legitimate_tool_are_refusals(self) -> None:
        for case in GROUND_TRUTH:
            if case.category == "adversarial" and case.expected_tool is None:
                assert case.should_refuse, (
                    f"{case.case_id}: adversarial case with no expected_tool must refuse."
                )

    def test_tool_cases_always_name_the_lnmp(self) -> None:
        """Both tools take exactly one argument, so every tool case must supply it."""
        for case in GROUND_TRUTH:
            if case.expected_tool is not None:
                assert set(case.expected_parameters) == {"lnmp"}, (
                    f"{case.case_id}: expected_parameters must be {{'lnmp': ...}}, "
                    f"got {case.expected_parameters!r}."
                )


@pytest.mark.evaluation
class TestGroundTruthExpectedToolValues:
    """Tool names referenced in the dataset must match real tool names."""

    KNOWN_TOOLS = {EDD_TOOL, WOA_TOOL}

    def test_all_expected_tool_values_are_known(self) -> None:
        for case in GROUND_TRUTH:
            if case.expected_tool is not None:
                assert case.expected_tool in self.KNOWN_TOOLS, (
                    f"{case.case_id}: expected_tool={case.expected_tool!r} is not a known tool. "
                    f"Known tools: {self.KNOWN_TOOLS}"
                )

    def test_lnmp_parameters_are_dd_mm_yyyy(self) -> None:
        """The tools only accept DD/MM/YYYY, whatever form the user typed."""
        for case in GROUND_TRUTH:
            if "lnmp" in case.expected_parameters:
                value = case.expected_parameters["lnmp"]
                assert DATE_RE.fullmatch(value), (
                    f"{case.case_id}: expected_parameters['lnmp']={value!r} is not DD/MM/YYYY."
                )


@pytest.mark.evaluation
class TestGroundTruthUserInputQuality:
    """User inputs must be non-trivial strings that a real user could plausibly type."""

    def test_all_user_inputs_are_non_empty(self) -> None:
        for case in GROUND_TRUTH:
            assert case.user_input and case.user_input.strip(), (
                f"{case.case_id}: user_input is empty."
            )

    def test_all_notes_are_strings(self) -> None:
        for case in GROUND_TRUTH:
            assert isinstance(case.notes, str), f"{case.case_id}: notes must be str."

    def test_happy_path_inputs_contain_a_date(self) -> None:
        for case in GROUND_TRUTH:
            if case.category == "happy_path":
                assert DATE_RE.search(case.user_input) or ISO_RE.search(case.user_input), (
                    f"{case.case_id}: happy_path input contains no date: {case.user_input!r}"
                )

    def test_dd_mm_yyyy_inputs_pass_the_same_date_to_the_tool(self) -> None:
        """When the user already typed DD/MM/YYYY the agent must pass it through unchanged."""
        for case in GROUND_TRUTH:
            if case.expected_tool is None:
                continue
            typed = DATE_RE.findall(case.user_input)
            if typed:
                assert case.expected_parameters["lnmp"] == typed[0], (
                    f"{case.case_id}: user typed {typed[0]!r} but expected lnmp is "
                    f"{case.expected_parameters['lnmp']!r}."
                )
