"""Shared fixtures: fake HTTP sessions and observation factories."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from earth_atlas.schemas import (
    IconicCategory,
    Observation,
    Observer,
    QualityGrade,
    Source,
    Taxon,
)


def make_response(payload: Any = None, status: int = 200, reason: str = "OK") -> Mock:
    """A stand-in for ``requests.Response`` carrying a JSON payload."""
    resp = Mock(spec=requests.Response)
    resp.status_code = status
    resp.reason = reason
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} {reason}")
    return resp


Route = Callable[[str, dict[str, Any]], Any]


def build_session(route: Route | Any) -> Mock:
    """
    Mock session whose ``get`` answers from ``route(url, params)``.

    ``route`` may return a payload, a ready-made response mock, or an
    exception to raise.  Anything other than a plain function (a payload, a
    response mock, an exception) is used as the answer to every call.
    """
    session = Mock(spec=requests.Session)

    def get(url: str, params: dict[str, Any] | None = None, **_: Any) -> Any:
        is_route = callable(route) and not isinstance(route, Mock)
        result = route(url, params or {}) if is_route else route
        if isinstance(result, BaseException):
            raise result
        if isinstance(result, Mock):
            return result
        return make_response(result)

    session.get.side_effect = get
    return session


@pytest.fixture
def make_session() -> Callable[[Route | Any], Mock]:
    return build_session


@pytest.fixture
def error_response() -> Callable[..., Mock]:
    def factory(status: int = 503, reason: str = "Service Unavailable") -> Mock:
        return make_response(None, status, reason)

    return factory


def build_observation(
    id: str = "1",
    source: Source = Source.INATURALIST,
    category: IconicCategory | None = IconicCategory.AVES,
    name: str = "Turdus migratorius",
    **overrides: Any,
) -> Observation:
    fields: dict[str, Any] = {
        "id": id,
        "source": source,
        "taxon": Taxon(scientific_name=name, iconic_category=category),
        "quality_grade": QualityGrade.RESEARCH,
        "observer": Observer(display_name="tester"),
    }
    fields.update(overrides)
    return Observation(**fields)


@pytest.fixture
def make_observation() -> Callable[..., Observation]:
    return build_observation
