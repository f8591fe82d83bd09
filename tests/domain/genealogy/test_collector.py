from __future__ import annotations

import pytest

from netgenealogy.domain.genealogy import collect_artifact_networks
from netgenealogy.domain.model import ArtifactNetwork, ObservedBlock
from tests.helpers.genealogy import make_network, observe


def test_collect_orders_by_height_and_links_adjacent_pairs() -> None:
    a = make_network(10)
    b = make_network(20)
    c = make_network(15)

    collected = collect_artifact_networks([observe(a), observe(b), observe(c)])

    assert collected is not None
    assert collected.ancestor == a.ref
    assert collected.descendant == b.ref
    assert [(link.ancestor, link.descendant) for link in collected.links] == [
        (a.ref, c.ref),
        (c.ref, b.ref),
    ]


@pytest.mark.parametrize("heights", [[3, 1, 2], [50, 7, 12, 8, 100], [0, 1]])
def test_collect_builds_linear_chain(heights: list[int]) -> None:
    networks = [make_network(height) for height in heights]
    height_by_ref = {network.ref: network.historic_block.height for network in networks}

    collected = collect_artifact_networks(observe(network) for network in networks)

    assert collected is not None
    assert len(collected.links) == len(networks) - 1
    for link in collected.links:
        assert height_by_ref[link.ancestor] < height_by_ref[link.descendant]
    for earlier, later in zip(collected.links, collected.links[1:], strict=False):
        assert earlier.descendant == later.ancestor


def test_collect_singleton_is_its_own_ancestor_and_descendant() -> None:
    network = make_network(42)

    collected = collect_artifact_networks([observe(network)])

    assert collected is not None
    assert collected.ancestor == collected.descendant == network.ref
    assert collected.links == ()


def test_collect_returns_none_without_usable_observations() -> None:
    network = make_network(5)
    observations = [
        None,
        ArtifactNetwork(block=None, network=network.ref),
        ArtifactNetwork(block=ObservedBlock(height=5), network=None),
    ]

    assert collect_artifact_networks(observations) is None
    assert collect_artifact_networks([]) is None


def test_collect_skips_invalid_observations() -> None:
    early = make_network(1)
    late = make_network(9)

    collected = collect_artifact_networks(
        [observe(late), ArtifactNetwork(block=ObservedBlock(height=4)), None, observe(early)]
    )

    assert collected is not None
    assert collected.ancestor == early.ref
    assert collected.descendant == late.ref
    assert len(collected.links) == 1


def test_collect_keeps_input_order_on_equal_heights() -> None:
    first = make_network(7)
    second = make_network(7, hash_="0xother")

    collected = collect_artifact_networks([observe(second), observe(first)])

    assert collected is not None
    assert collected.ancestor == second.ref
    assert collected.descendant == first.ref


def test_collect_merges_artifacts_sharing_a_network() -> None:
    migration = make_network(10)
    later = make_network(30)

    collected = collect_artifact_networks(
        [observe(migration), observe(later), observe(migration), observe(later)]
    )

    assert collected is not None
    assert [(link.ancestor, link.descendant) for link in collected.links] == [
        (migration.ref, later.ref)
    ]
