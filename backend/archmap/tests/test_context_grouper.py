"""
Test suite for grouping catalog components into bounded contexts
"""

from archmap.domains.architecture.services.context_grouper import group_into_contexts
from archmap.domains.architecture.services.naming import DEFAULT_CONTEXT_ID
from factories import make_api, make_component


def test_contexts_follow_first_seen_order():
    components = [
        make_component("svc-b", system="zeta"),
        make_component("svc-a", system="alpha"),
        make_component("svc-c", system="zeta"),
    ]

    contexts = group_into_contexts(components, [])

    assert [c.id for c in contexts] == ["zeta", "alpha"]
    assert [c.name for c in contexts[0].components] == ["svc-b", "svc-c"]
    assert contexts[0].display_name == "Zeta"


def test_mixed_grouped_and_ungrouped_components():
    components = [
        make_component("svc-a", system="payment-core"),
        make_component("svc-b", domain="lending"),
        make_component("svc-c"),
        make_component("svc-d", system=""),
    ]

    contexts = group_into_contexts(components, [])

    assert [c.id for c in contexts] == ["payment-core", "lending", DEFAULT_CONTEXT_ID]
    default_context = contexts[2]
    assert default_context.display_name == "Default Context"
    assert [c.name for c in default_context.components] == ["svc-c", "svc-d"]
    assert contexts[1].domain == "lending"


def test_unknown_api_references_are_dropped():
    components = [
        make_component(
            "svc-a",
            system="ctx",
            provides=["api:default/known-api", "ghost-api"],
            consumes=["missing-api"],
        )
    ]
    apis = [make_api("known-api", protocol_kind="grpc")]

    (context,) = group_into_contexts(components, apis)

    assert [a.name for a in context.provided_apis] == ["known-api"]
    assert context.provided_apis[0].entity_ref == "api:default/known-api"
    assert context.provided_apis[0].type == "grpc"
    assert context.consumed_apis == []


def test_api_sets_are_deduplicated_by_bare_id():
    components = [
        make_component("svc-a", system="ctx", consumes=["api:default/customer-api"]),
        make_component("svc-b", system="ctx", consumes=["customer-api", "account-api"]),
    ]
    apis = [make_api("customer-api"), make_api("account-api")]

    (context,) = group_into_contexts(components, apis)

    assert [a.name for a in context.consumed_apis] == ["customer-api", "account-api"]
    # first reference encountered is kept
    assert context.consumed_apis[0].entity_ref == "api:default/customer-api"


def test_first_non_empty_owner_domain_and_source_url_win():
    components = [
        make_component("svc-a", system="ctx"),
        make_component(
            "svc-b",
            system="ctx",
            owning_team="team-b",
            domain="banking-core",
            annotations={"github.com/project-slug": "mybank/svc-b"},
        ),
        make_component(
            "svc-c",
            system="ctx",
            owning_team="team-c",
            domain="payments",
            annotations={"github.com/project-slug": "mybank/svc-c"},
        ),
    ]

    (context,) = group_into_contexts(components, [])

    assert context.owning_team == "team-b"
    assert context.domain == "banking-core"
    assert context.source_url == "https://github.com/mybank/svc-b"
    assert context.components[0].source_url is None
    assert context.components[2].source_url == "https://github.com/mybank/svc-c"


def test_component_summaries(banking_records):
    components, apis = banking_records

    contexts = group_into_contexts(components, apis)

    payment = contexts[0]
    assert payment.id == "payment-core"
    assert payment.display_name == "Payment Core"
    assert payment.owning_team == "payments-squad"
    assert payment.source_url == "https://github.com/mybank/payment-gateway"
    gateway = payment.components[0]
    assert gateway.name == "payment-gateway"
    assert gateway.entity_ref == "component:default/payment-gateway"
    assert gateway.type == "service"
    assert [a.name for a in payment.provided_apis] == [
        "payment-gateway-api",
        "payment-validation-api",
    ]


def test_context_ids_are_unique(banking_records):
    components, apis = banking_records

    contexts = group_into_contexts(components, apis)

    ids = [c.id for c in contexts]
    assert len(ids) == len(set(ids))
    assert set(ids) == {c.grouping_key for c in components}


def test_empty_snapshot():
    assert group_into_contexts([], []) == []
