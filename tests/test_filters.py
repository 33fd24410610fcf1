"""Tests for the client-side category filter."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from earth_atlas.filters import category_counts, filter_observations
from earth_atlas.schemas import IconicCategory, Observation


@pytest.fixture
def observations(make_observation: Callable[..., Observation]) -> list[Observation]:
    return [
        make_observation(id="1", category=IconicCategory.AVES),
        make_observation(id="2", category=IconicCategory.PLANTAE),
        make_observation(id="3", category=None),
        make_observation(id="4", category=IconicCategory.AVES),
    ]


class TestFilterObservations:
    def test_all_is_identity(self, observations: list[Observation]) -> None:
        assert filter_observations(observations, "all") is observations

    def test_exact_match(self, observations: list[Observation]) -> None:
        birds = filter_observations(observations, IconicCategory.AVES)
        assert [o.id for o in birds] == ["1", "4"]

    def test_accepts_string_category(self, observations: list[Observation]) -> None:
        plants = filter_observations(observations, "Plantae")
        assert [o.id for o in plants] == ["2"]

    def test_uncategorised_dropped(self, observations: list[Observation]) -> None:
        for category in IconicCategory:
            assert all(o.id != "3" for o in filter_observations(observations, category))

    def test_no_matches(self, observations: list[Observation]) -> None:
        assert list(filter_observations(observations, IconicCategory.FUNGI)) == []

    def test_input_not_mutated(self, observations: list[Observation]) -> None:
        before = list(observations)
        filter_observations(observations, IconicCategory.AVES)
        assert observations == before

    def test_result_is_subsequence(self, observations: list[Observation]) -> None:
        birds = filter_observations(observations, IconicCategory.AVES)
        assert all(o in observations for o in birds)


class TestCategoryCounts:
    def test_counts_with_other(self, observations: list[Observation]) -> None:
        assert category_counts(observations) == {"Aves": 2, "Plantae": 1, "Other": 1}

    def test_largest_first(self, observations: list[Observation]) -> None:
        assert next(iter(category_counts(observations))) == "Aves"

    def test_empty(self) -> None:
        assert category_counts([]) == {}
