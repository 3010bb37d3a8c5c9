"""Tenant context threaded through every data-access call."""

from dataclasses import dataclass

from tutor_desk.app.core.settings import get_settings


@dataclass(frozen=True)
class TenantContext:
    tutor_id: str


def default_tenant() -> TenantContext:
    return TenantContext(tutor_id=get_settings().default_tutor_id)
