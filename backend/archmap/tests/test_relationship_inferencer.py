"""
Test suite for inferring DDD relationships between bounded contexts
"""

import pytest

from archmap.domains.architecture.models.context_model import (
    ContextRelationshipType,
    RelationshipStrength,
)
from archmap.domains.architecture.services.context_grouper import group_into_contexts
from archmap.domains.architecture.services.relationship_inferencer import (
    infer_relationships,
)
from factories import make_api, make_component


def _infer(components, apis):
    return infer_relationships(group_into_contexts(components, apis))


@pytest.mark.parametrize(
    "upstream_domain, downstream_domain, protocol_kind, expected",
    [
        ("banking", "banking", "openapi", ContextRelationshipType.SHARED_KERNEL),
        ("banking", "banking", "graphql", ContextRelationshipType.SHARED_KERNEL),
        ("banking", "lending", "openapi", ContextRelationshipType.OPEN_HOST_SERVICE),
        (None, None, "gRPC", ContextRelationshipType.OPEN_HOST_SERVICE),
        ("banking", "lending", "asyncapi", ContextRelationshipType.CUSTOMER_SUPPLIER),
        (None, None, None, ContextRelationshipType.CUSTOMER_SUPPLIER),
    ],
)
def test_classification_chain(upstream_domain, downstream_domain, protocol_kind, expected):
    components = [
        make_component("provider", system="up", domain=upstream_domain, provides=["shared-api"]),
        make_component("consumer", system="down", domain=downstream_domain, consumes=["shared-api"]),
    ]

    (relationship,) = _infer(components, [make_api("shared-api", protocol_kind=protocol_kind)])

    assert relationship.relationship_type == expected
    assert relationship.upstream_context_id == "up"
    assert relationship.downstream_context_id == "down"
    assert relationship.strength == RelationshipStrength.MEDIUM


def test_self_loops_are_suppressed():
    components = [
        make_component("customer-service", system="customer", provides=["customer-api"]),
        make_component("kyc-service", system="customer", consumes=["customer-api"]),
    ]

    assert _infer(components, [make_api("customer-api")]) == []


def test_unresolved_consumed_api_emits_no_edge():
    components = [
        make_component("consumer", system="down", consumes=["orphan-api"]),
    ]

    contexts = group_into_contexts(components, [make_api("orphan-api")])

    assert infer_relationships(contexts) == []
    assert [a.name for a in contexts[0].consumed_apis] == ["orphan-api"]


def test_one_edge_per_api_and_contiguous_ids():
    components = [
        make_component("provider", system="up", provides=["a-api", "b-api"]),
        make_component("consumer-1", system="down-1", consumes=["api:default/b-api", "a-api"]),
        make_component("consumer-2", system="down-2", consumes=["a-api", "unknown-api"]),
    ]
    apis = [make_api("a-api"), make_api("b-api")]

    relationships = _infer(components, apis)

    assert [r.id for r in relationships] == ["rel-1", "rel-2", "rel-3"]
    assert [(r.downstream_context_id, r.via_api_references) for r in relationships] == [
        ("down-1", ["api:default/b-api"]),
        ("down-1", ["a-api"]),
        ("down-2", ["a-api"]),
    ]


def test_first_provider_in_context_order_wins():
    components = [
        make_component("provider-1", system="first", provides=["dup-api"]),
        make_component("provider-2", system="second", provides=["dup-api"]),
        make_component("consumer", system="second", consumes=["dup-api"]),
    ]

    (relationship,) = _infer(components, [make_api("dup-api")])

    assert relationship.upstream_context_id == "first"
    assert relationship.downstream_context_id == "second"


def test_no_edge_when_consumer_is_first_provider():
    components = [
        make_component("both", system="first", provides=["dup-api"], consumes=["dup-api"]),
        make_component("provider-2", system="second", provides=["dup-api"]),
    ]

    assert _infer(components, [make_api("dup-api")]) == []
