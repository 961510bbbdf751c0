from flask import render_template, request, redirect, url_for, flash, current_app, send_file, Response
from . import bp
from .forms import CandidateForm, ReasonForm
from ...extensions import dashboard
from ...errors import ShortlistFull, StorageFailure
from ...models.candidate import availability_of, experience_count, experiences_of
from ...services.dashboard import NAME_REQUIRED
from ...services.export import shortlist_json, shortlist_email_text
from ...services.shortlist import suggest_reason
from ...services.views import SORT_EXPERIENCE
import io


def _filters():
    return {
        "q": request.args.get("q", ""),
        "availability": request.args.get("availability", ""),
        "sort": request.args.get("sort", ""),
    }


def _back():
    # only follow local paths handed back by our own templates
    target = request.form.get("next") or ""
    if not target.startswith("/") or target.startswith("//"):
        target = url_for("dashboard.index")
    return redirect(target)


def _flash_session_messages():
    if dashboard.error_message:
        flash(dashboard.error_message, "danger")
    if dashboard.success_message:
        flash(dashboard.success_message, "success")
    dashboard.clear_messages()


def _lookup(candidate_id):
    c = dashboard.find(candidate_id)
    if c is not None:
        return c
    for entry in dashboard.shortlist:
        if entry.get("id") == candidate_id:
            return entry
    return None


def _render_dashboard(form):
    dashboard.ensure_loaded()
    _flash_session_messages()

    filters = _filters()
    view = dashboard.view(query=filters["q"], availability=filters["availability"], sort=filters["sort"])
    return render_template(
        "dashboard/index.html",
        form=form,
        filters=filters,
        candidates=view,
        top=dashboard.top(view),
        loading=dashboard.loading,
        submitting=dashboard.submitting,
        shortlist=list(dashboard.shortlist),
        shortlist_limit=dashboard.shortlist.limit,
        is_shortlisted=dashboard.shortlist.contains,
        suggest_reason=suggest_reason,
        experience_count=experience_count,
        availability_of=availability_of,
        experiences_of=experiences_of,
        sort_experience=SORT_EXPERIENCE,
        success_ttl_ms=current_app.config.get("SUCCESS_MESSAGE_TTL_MS", 3000),
    )


@bp.get("/")
def index():
    return _render_dashboard(CandidateForm())


@bp.post("/refresh")
def refresh():
    dashboard.refresh()
    _flash_session_messages()
    return _back()


@bp.post("/candidates")
def add_candidate():
    form = CandidateForm()
    action = request.form.get("action", "")

    # experience rows are edited server-side: re-render the form with one more or one less row
    if action == "add_row":
        form.work_experiences.append_entry()
        return _render_dashboard(form)
    if action.startswith("remove_row:"):
        try:
            idx = int(action.split(":", 1)[1])
        except ValueError:
            idx = -1
        rows = [r for i, r in enumerate(form.work_experiences.data) if i != idx] or [{"role": "", "company": ""}]
        data = {"name": form.name.data, "work_availability": form.work_availability.data or [], "work_experiences": rows}
        return _render_dashboard(CandidateForm(formdata=None, data=data))

    if not form.validate_on_submit():
        if "name" in form.errors:
            flash(NAME_REQUIRED, "danger")
        else:
            flash("Invalid form submission", "danger")
        return _render_dashboard(form)

    saved = dashboard.add_candidate(
        form.name.data,
        availability=form.work_availability.data,
        experiences=form.work_experiences.data,
    )
    _flash_session_messages()
    if saved is None:
        return _render_dashboard(form)
    return redirect(url_for("dashboard.index"))


@bp.post("/shortlist/<candidate_id>/toggle")
def toggle_shortlist(candidate_id):
    dashboard.ensure_loaded()
    c = _lookup(candidate_id)
    if c is None:
        flash("Candidate not found", "danger")
        return _back()
    try:
        dashboard.shortlist.toggle(c)
    except ShortlistFull as e:
        flash(str(e), "alert")
    except StorageFailure:
        current_app.logger.exception("Saving shortlist failed")
        flash("Failed to save shortlist", "danger")
    return _back()


@bp.post("/shortlist/<candidate_id>/note")
def quick_note(candidate_id):
    dashboard.ensure_loaded()
    c = _lookup(candidate_id)
    if c is None:
        flash("Candidate not found", "danger")
        return _back()
    form = ReasonForm()
    try:
        dashboard.shortlist.add_note(c, form.reason.data or "")
    except ShortlistFull as e:
        flash(str(e), "alert")
    except StorageFailure:
        current_app.logger.exception("Saving shortlist failed")
        flash("Failed to save shortlist", "danger")
    return _back()


@bp.post("/shortlist/<candidate_id>/reason")
def update_reason(candidate_id):
    form = ReasonForm()
    try:
        dashboard.shortlist.set_reason(candidate_id, form.reason.data or "")
    except StorageFailure:
        current_app.logger.exception("Saving shortlist failed")
        flash("Failed to save shortlist", "danger")
    return _back()


@bp.post("/shortlist/<candidate_id>/remove")
def remove_from_shortlist(candidate_id):
    try:
        dashboard.shortlist.remove(candidate_id)
    except StorageFailure:
        current_app.logger.exception("Saving shortlist failed")
        flash("Failed to save shortlist", "danger")
    return _back()


@bp.get("/shortlist/export.json")
def export_shortlist_json():
    bio = io.BytesIO(shortlist_json(list(dashboard.shortlist)).encode("utf-8"))
    bio.seek(0)
    return send_file(bio, as_attachment=True, download_name="shortlist.json", mimetype="application/json")


@bp.get("/shortlist/email.txt")
def export_email_text():
    return Response(shortlist_email_text(list(dashboard.shortlist)), mimetype="text/plain")
