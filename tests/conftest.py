"""Shared fixtures for the detection engine tests."""

from __future__ import annotations

import pytest

from uxdetective.schemas.snapshot import PageSnapshot


def build_snapshot(
    raw_text: str = "",
    headings=(),
    buttons=(),
    alerts=(),
    url: str = "https://shop.example.com/checkout",
) -> PageSnapshot:
    return PageSnapshot(
        url=url,
        raw_text=raw_text,
        headings=tuple(headings),
        buttons=tuple(buttons),
        alerts=tuple(alerts),
    )


@pytest.fixture
def make_snapshot():
    """Factory for snapshots; every corpus defaults to empty."""
    return build_snapshot


def assert_context_invariant(location) -> None:
    offset = location.start_index - location.context_start
    length = location.end_index - location.start_index
    assert location.context[offset:offset + length] == location.exact_match


# Fires creditCardForFreeTrial, manipulativeButtons and fomo, nothing else
CHECKOUT_PAGE = dict(
    raw_text=(
        "Up to ₹300 OFF* on Free Cancellation feature & more on trains! "
        "Book today, offer valid only this week."
    ),
    headings=["Exclusive Offers"],
    buttons=["Visa", "Continue"],
    alerts=["Valid only on app"],
)
