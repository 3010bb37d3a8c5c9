"""Request dependency resolving the tenant a call acts for."""

from fastapi import Header

from tutor_desk.app.core.tenant import TenantContext, default_tenant


def get_tenant(x_tutor_id: str | None = Header(default=None)) -> TenantContext:
    # No header means the single-tenant deployment's configured tutor
    if not x_tutor_id:
        return default_tenant()
    return TenantContext(tutor_id=x_tutor_id)
