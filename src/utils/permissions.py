"""Role based capability checks for catalog, customer and order actions."""

from enum import Enum
from typing import Dict, FrozenSet, Optional, Union


class Role(str, Enum):
    """Staff roles known to the inventory API."""

    ADMIN = "admin"
    MANAGER = "manager"
    SALES = "sales"
    VIEWER = "viewer"


class Capability(str, Enum):
    """Actions gated by role."""

    ADD_PRODUCT = "add_product"
    EDIT_PRODUCT = "edit_product"
    ADD_CUSTOMER = "add_customer"
    EDIT_CUSTOMER = "edit_customer"
    DELETE_CUSTOMER = "delete_customer"
    DELETE_ORDER = "delete_order"
    VIEW_REPORTS = "view_reports"


_STAFF_EDITORS = frozenset({Role.ADMIN, Role.MANAGER, Role.SALES})

CAPABILITY_GRANTS: Dict[Capability, FrozenSet[Role]] = {
    Capability.ADD_PRODUCT: frozenset({Role.MANAGER, Role.SALES}),
    Capability.EDIT_PRODUCT: frozenset({Role.MANAGER, Role.SALES}),
    Capability.ADD_CUSTOMER: _STAFF_EDITORS,
    Capability.EDIT_CUSTOMER: _STAFF_EDITORS,
    Capability.DELETE_CUSTOMER: frozenset({Role.MANAGER}),
    Capability.DELETE_ORDER: frozenset({Role.ADMIN, Role.MANAGER}),
    Capability.VIEW_REPORTS: frozenset(Role),
}


def has_capability(role: Union[Role, str, None], capability: Union[Capability, str]) -> bool:
    """Return True if ``role`` may perform ``capability``; unknown roles get nothing."""
    try:
        resolved_role = role if isinstance(role, Role) else Role(str(role or "").strip().lower())
        resolved_capability = Capability(capability)
    except ValueError:
        return False
    return resolved_role in CAPABILITY_GRANTS.get(resolved_capability, frozenset())


def role_from_event(event) -> Optional[str]:
    """Role forwarded by the front end in the ``x-user-role`` header, if any."""
    headers = event.get("headers") or {}
    for key, value in headers.items():
        if key.lower() == "x-user-role":
            return value
    return None
