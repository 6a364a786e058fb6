"""Test container builder."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from citadel.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container with test doubles for every swappable component.

    Args:
        unmock: Components that should use their production implementation,
            e.g. ``{"persistence"}`` against a running Postgres

    Returns:
        Container usable directly or passed to ``create_app``

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    components = {base.__mock_component__ for base in PROVIDERS} - {None}
    unknown = unmock - components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=(
                base.__mock_component__ is not None
                and base.__mock_component__ not in unmock
            ),
        )()
        for base in PROVIDERS
    ]
    # FastapiProvider lets the same container back a TestClient app
    return make_async_container(*providers, FastapiProvider())
