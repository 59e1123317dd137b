"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from blogger.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit and e2e tests - in-memory persistence
        container = build_test_container()

        # Integration tests - real PostgreSQL, assumes it is running
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__mock_component__", None)
        if not base.__subclasses__() or component_name is None:
            provider_class = get_provider(base, use_mock=False)
        else:
            provider_class = get_provider(base, use_mock=component_name not in unmock)
        provider_instances.append(provider_class())

    # FastapiProvider lets the same container serve a TestClient
    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject components that have no mock to replace.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components are named
    """
    all_components = {
        getattr(p, "__mock_component__")
        for p in PROVIDERS
        if p.__subclasses__() and hasattr(p, "__mock_component__")
    }
    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
