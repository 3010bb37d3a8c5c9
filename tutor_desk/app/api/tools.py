"""Tool endpoints for the chat assistant."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tutor_desk.app.core.errors import UnknownToolError
from tutor_desk.app.core.tenant import TenantContext
from tutor_desk.app.db.session import get_db
from tutor_desk.app.dependencies.tenant import get_tenant
from tutor_desk.app.tools.registry import TOOLS, invoke_tool

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get("/")
async def list_tools():
    return [tool.declaration() for tool in TOOLS.values()]


@router.post("/{name}")
async def call_tool(
    name: str,
    arguments: dict[str, Any] | None = Body(default=None),
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    try:
        return invoke_tool(db, tenant, name, arguments)
    except UnknownToolError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
