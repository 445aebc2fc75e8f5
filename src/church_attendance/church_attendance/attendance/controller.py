from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, abort, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import format_br_date, long_date_label, parse_iso_date_or_none, today_local
from ..container import Container
from ..core.enums import ExportPeriod, FilterKind
from ..core.exceptions import DomainError, RecordNotFoundError, ValidationError
from .aggregation import build_dashboard_stats, group_by_month
from .charts import attendance_series, category_series, monthly_series
from .filters import AttendanceFilter
from .forms import entry_from_form, form_values
from .model import AttendanceEntry, AttendanceRecord

logger = logging.getLogger(__name__)

FILTER_LABELS = {
    FilterKind.DAY: "Dia",
    FilterKind.MONTH: "Mês",
    FilterKind.YEAR: "Ano",
}

EXPORT_LABELS = {
    ExportPeriod.DAY: "Dia Específico",
    ExportPeriod.MONTH: "Mês Específico",
    ExportPeriod.YEAR: "Ano Específico",
    ExportPeriod.ALL: "Período Completo",
}


def _record_to_dict(r: AttendanceRecord) -> dict:
    return {
        "id": r.record_id,
        "date": r.service_date.isoformat(),
        "homens": r.homens,
        "homens_visitantes": r.homens_visitantes,
        "mulheres": r.mulheres,
        "mulheres_visitantes": r.mulheres_visitantes,
        "kids": r.kids,
        "baby": r.baby,
        "total": r.total,
        "membros": r.membros,
        "visitantes": r.visitantes,
        "criancas": r.criancas,
    }


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    app.jinja_env.filters["br_date"] = format_br_date
    app.jinja_env.filters["long_date"] = long_date_label

    def _current_filter() -> AttendanceFilter:
        return AttendanceFilter.from_params(request.values.get("filtro"), request.values.get("data"))

    def _filter_args(active: AttendanceFilter) -> dict:
        if not active.is_active:
            return {}
        return {"filtro": active.kind.value, "data": active.reference_date.isoformat()}

    def _render_index(*, entry: Optional[AttendanceEntry] = None, open_form: bool = False, status: int = 200):
        today = today_local()
        active = _current_filter()
        all_records = service.list_records()
        filtered = service.filtered(active)

        return (
            render_template(
                "index.html",
                church_name=app.config.get("CHURCH_NAME"),
                tab=request.values.get("tab", "dashboard"),
                active_filter=active,
                filter_args=_filter_args(active),
                filter_labels=FILTER_LABELS,
                export_labels=EXPORT_LABELS,
                stats=build_dashboard_stats(filtered, all_records, today=today),
                line_series=attendance_series(filtered, limit=int(app.config.get("CHART_RECENT_LIMIT", 8))),
                monthly_series=monthly_series(filtered),
                category_series=category_series(filtered),
                months=group_by_month(all_records),
                form=form_values(entry, today=today),
                open_form=open_form,
            ),
            status,
        )

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return _render_index()

    @app.route("/frequencias", methods=["POST"], endpoint="attendance_create")
    def attendance_create():
        entry = entry_from_form(request.form, today=today_local())
        try:
            record = service.add(entry)
        except ValidationError as e:
            flash(str(e), "warning")
            return _render_index(entry=entry, open_form=True, status=400)
        except Exception:
            logger.exception("Failed to add attendance")
            flash("Erro inesperado ao registrar a frequência", "danger")
            return redirect(url_for("index", **_filter_args(_current_filter())))

        flash(service.success_message(record), "success")
        return redirect(url_for("index", **_filter_args(_current_filter())))

    @app.route("/frequencias/<record_id>/editar", methods=["GET"], endpoint="attendance_edit")
    def attendance_edit(record_id: str):
        try:
            record = service.get(record_id)
        except RecordNotFoundError:
            abort(404)
        return render_template(
            "edit.html",
            church_name=app.config.get("CHURCH_NAME"),
            record=record,
            form=form_values(record.to_entry(), today=today_local()),
            filter_args=_filter_args(_current_filter()),
        )

    @app.route("/frequencias/<record_id>", methods=["POST"], endpoint="attendance_update")
    def attendance_update(record_id: str):
        filter_args = _filter_args(_current_filter())
        entry = entry_from_form(request.form, today=today_local())
        try:
            record = service.update(record_id, entry)
        except RecordNotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("index", tab="history", **filter_args))
        except ValidationError as e:
            flash(str(e), "warning")
            try:
                current = service.get(record_id)
            except DomainError:
                # removed while the form was being resubmitted
                return redirect(url_for("index", tab="history", **filter_args))
            return (
                render_template(
                    "edit.html",
                    church_name=app.config.get("CHURCH_NAME"),
                    record=current,
                    form=form_values(entry, today=today_local()),
                    filter_args=filter_args,
                ),
                400,
            )

        flash(service.success_message(record, updated=True), "success")
        return redirect(url_for("index", tab="history", **filter_args))

    @app.route("/frequencias/<record_id>/excluir", methods=["POST"], endpoint="attendance_delete")
    def attendance_delete(record_id: str):
        try:
            service.remove(record_id)
            flash("Frequência excluída.", "info")
        except DomainError as e:
            flash(str(e), "warning")
        return redirect(url_for("index", tab="history", **_filter_args(_current_filter())))

    @app.route("/exportar.csv", methods=["GET"], endpoint="attendance_export")
    def attendance_export():
        try:
            period = ExportPeriod(request.args.get("periodo") or ExportPeriod.ALL.value)
        except ValueError:
            flash("Período de exportação inválido", "warning")
            return redirect(url_for("index"))

        reference = parse_iso_date_or_none(request.args.get("data"))
        try:
            exported = container.export_service.export(period, reference)
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("index"))

        return app.response_class(
            exported.content,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={exported.filename}"},
        )

    @app.route("/api/frequencias", methods=["GET"], endpoint="api_attendance_list")
    def api_attendance_list():
        active = _current_filter()
        all_records = service.list_records()
        filtered = service.filtered(active)
        stats = build_dashboard_stats(filtered, all_records, today=today_local())

        return jsonify(
            {
                "filter": _filter_args(active) or None,
                "records": [_record_to_dict(r) for r in filtered],
                "stats": {
                    "growth": stats.growth,
                    "growth_label": stats.growth_label,
                    "growth_trend": stats.growth_trend.value,
                    "average": stats.average,
                    "visitors_this_month": stats.visitors_this_month,
                    "last_service_total": stats.last_service_total,
                },
            }
        )
