"""
模擬目錄資料

模擬一個銀行微服務架構，包含五個 bounded context (支付、帳戶、客戶、
貸款、交易)、REST/gRPC API 的提供與使用關係，以及 GitHub 原始碼位置。
用於本地開發 (ARCHITECTURE_USE_MOCK_DATA=true) 與測試。
"""

from typing import Any, Dict, List, Optional

from archmap.domains.catalog.models.catalog_model import EntityKind

API_VERSION = "backstage.io/v1alpha1"
GITHUB_ORG = "mybank"

# (name, title, description)
DOMAINS = [
    ("payments", "Payments Domain", "Payment processing and transaction management"),
    (
        "banking-core",
        "Banking Core Domain",
        "Core banking operations - accounts, customers, transactions",
    ),
    ("lending", "Lending Domain", "Loan origination and management"),
]

# (name, title, description, owner, domain)
SYSTEMS = [
    (
        "payment-core",
        "Payment Core Context",
        "Payment processing bounded context",
        "payments-squad",
        "payments",
    ),
    (
        "account-management",
        "Account Management Context",
        "Account operations and balance management",
        "accounts-squad",
        "banking-core",
    ),
    (
        "customer-management",
        "Customer Management Context",
        "Customer profile and KYC management",
        "customer-squad",
        "banking-core",
    ),
    (
        "loan-origination",
        "Loan Origination Context",
        "Loan application and approval process",
        "lending-squad",
        "lending",
    ),
    (
        "transaction-processing",
        "Transaction Processing Context",
        "Transaction history and reconciliation",
        "operations-squad",
        "banking-core",
    ),
]

# (name, title, description, type, owner, system)
APIS = [
    ("payment-gateway-api", "Payment Gateway API", "Process payment transactions",
     "openapi", "payments-squad", "payment-core"),
    ("payment-validation-api", "Payment Validation API", "Validate payment requests",
     "openapi", "payments-squad", "payment-core"),
    ("account-api", "Account API", "Account CRUD operations",
     "openapi", "accounts-squad", "account-management"),
    ("balance-inquiry-api", "Balance Inquiry API", "Check account balances",
     "openapi", "accounts-squad", "account-management"),
    ("customer-api", "Customer API", "Customer profile management",
     "openapi", "customer-squad", "customer-management"),
    ("kyc-verification-api", "KYC Verification API", "Customer verification and KYC",
     "grpc", "customer-squad", "customer-management"),
    ("loan-application-api", "Loan Application API", "Submit and manage loan applications",
     "openapi", "lending-squad", "loan-origination"),
    ("transaction-history-api", "Transaction History API", "Query transaction history",
     "openapi", "operations-squad", "transaction-processing"),
]

# (name, title, description, owner, system, provides, consumes)
COMPONENTS = [
    ("payment-gateway", "Payment Gateway Service", "Core payment processing service",
     "payments-squad", "payment-core", ["payment-gateway-api"],
     ["account-api", "balance-inquiry-api", "transaction-history-api"]),
    ("payment-validator", "Payment Validator Service", "Validates payment requests",
     "payments-squad", "payment-core", ["payment-validation-api"], []),
    ("account-service", "Account Service", "Account management service",
     "accounts-squad", "account-management", ["account-api", "balance-inquiry-api"],
     ["customer-api", "transaction-history-api"]),
    ("customer-service", "Customer Service", "Customer profile service",
     "customer-squad", "customer-management", ["customer-api"], []),
    ("kyc-service", "KYC Service", "KYC verification service",
     "customer-squad", "customer-management", ["kyc-verification-api"], ["customer-api"]),
    ("loan-application-service", "Loan Application Service", "Loan application processing",
     "lending-squad", "loan-origination", ["loan-application-api"],
     ["customer-api", "kyc-verification-api", "account-api"]),
    ("transaction-service", "Transaction Service", "Transaction recording and history",
     "operations-squad", "transaction-processing", ["transaction-history-api"], []),
]


def _entity(
    kind: EntityKind,
    name: str,
    title: str,
    description: str,
    spec: Dict[str, Any],
    annotations: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    metadata: Dict[str, Any] = {
        "name": name,
        "title": title,
        "description": description,
    }
    if annotations:
        metadata["annotations"] = annotations
    return {"apiVersion": API_VERSION, "kind": kind.value, "metadata": metadata, "spec": spec}


def generate_mock_catalog_entities() -> List[Dict[str, Any]]:
    """產生用於測試 context 映射的模擬目錄實體"""
    entities: List[Dict[str, Any]] = []

    for name, title, description in DOMAINS:
        entities.append(
            _entity(EntityKind.DOMAIN, name, title, description, {"owner": "platform-team"})
        )

    for name, title, description, owner, domain in SYSTEMS:
        entities.append(
            _entity(
                EntityKind.SYSTEM, name, title, description, {"owner": owner, "domain": domain}
            )
        )

    for name, title, description, api_type, owner, system in APIS:
        entities.append(
            _entity(
                EntityKind.API,
                name,
                title,
                description,
                {
                    "type": api_type,
                    "lifecycle": "production",
                    "owner": owner,
                    "system": system,
                    "definition": "grpc protobuf" if api_type == "grpc" else "openapi: 3.0.0",
                },
            )
        )

    for name, title, description, owner, system, provides, consumes in COMPONENTS:
        slug = f"{GITHUB_ORG}/{name}"
        entities.append(
            _entity(
                EntityKind.COMPONENT,
                name,
                title,
                description,
                {
                    "type": "service",
                    "lifecycle": "production",
                    "owner": owner,
                    "system": system,
                    "providesApis": list(provides),
                    "consumesApis": list(consumes),
                },
                annotations={
                    "github.com/project-slug": slug,
                    "backstage.io/source-location": f"url:https://github.com/{slug}",
                },
            )
        )

    return entities


def entity_ref(entity: Dict[str, Any]) -> str:
    """組出實體參照，例如 ``component:default/payment-gateway``"""
    namespace = entity["metadata"].get("namespace", "default")
    return f"{entity['kind'].lower()}:{namespace}/{entity['metadata']['name']}"
