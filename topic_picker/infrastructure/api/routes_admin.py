"""Admin endpoints — list/filter, statistics, CSV export, deletion."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, Response

from topic_picker.adapters.csv_export.exporter import export_csv, export_filename
from topic_picker.application.use_cases.admin_dashboard import AdminDashboardUseCase
from topic_picker.domain.policies.dashboard import AssignmentFilter
from topic_picker.domain.value_objects.enums import Category, Channel
from topic_picker.infrastructure.api.dependencies import get_admin_uc, require_admin
from topic_picker.infrastructure.api.serializers import serialize_assignment

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _filter(
    channel: Channel | None = None,
    category: Category | None = None,
    room: int | None = None,
    search: str | None = None,
) -> AssignmentFilter:
    return AssignmentFilter(channel=channel, category=category, room=room, search=search)


@router.get("/assignments")
async def list_assignments(
    criteria: AssignmentFilter = Depends(_filter),
    uc: AdminDashboardUseCase = Depends(get_admin_uc),
):
    assignments = await uc.list_assignments(criteria)
    return {
        "total": len(assignments),
        "assignments": [serialize_assignment(a) for a in assignments],
    }


@router.get("/statistics")
async def statistics(uc: AdminDashboardUseCase = Depends(get_admin_uc)):
    return asdict(await uc.statistics())


@router.get("/export")
async def export(
    criteria: AssignmentFilter = Depends(_filter),
    uc: AdminDashboardUseCase = Depends(get_admin_uc),
):
    """Download the (filtered) assignments as CSV."""
    body = export_csv(await uc.list_assignments(criteria))
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


@router.delete("/assignments/{record_id}")
async def delete_assignment(
    record_id: str,
    uc: AdminDashboardUseCase = Depends(get_admin_uc),
):
    await uc.delete(record_id)
    return {"status": "ok", "message": "Assignment deleted successfully."}


@router.delete("/assignments")
async def clear_assignments(uc: AdminDashboardUseCase = Depends(get_admin_uc)):
    await uc.clear_all()
    return {"status": "ok", "message": "All assignments cleared."}
