"""Flask app serving expanded occurrences, day views and calendar feeds."""

from datetime import date

from flask import Flask, Response, jsonify, request

from .calendar_query import CalendarQuery
from .config import PlannerConfig
from .day_view import DayEntry
from .exceptions import EventNotFoundError, PlannerError
from .output.ics_writer import build_calendar
from .output.json_writer import occurrences_to_json
from .recurrence import expand
from .recurrence_format import describe_recurrence
from .storage.event_store import JSONEventStore
from .utils import parse_date


def _window_args() -> tuple[date, date]:
    """Read the start/end query parameters; raises ValueError if missing or bad."""
    start = request.args.get("start")
    end = request.args.get("end")
    if not start or not end:
        raise ValueError("start and end query parameters are required (YYYY-MM-DD)")
    return parse_date(start), parse_date(end)


def _entry_to_json(entry: DayEntry) -> dict:
    return {
        "occurrence": entry.occurrence.model_dump(mode="json"),
        "day": entry.day.isoformat(),
        "start_time": entry.start_time.isoformat() if entry.start_time else None,
        "end_time": entry.end_time.isoformat() if entry.end_time else None,
        "is_all_day": entry.is_all_day,
        "position": entry.position.value,
    }


def create_app(config: PlannerConfig | None = None):
    """Build the Flask app.

    Args:
        config: Storage settings; read from the environment if omitted.
    """
    app = Flask(__name__)
    config = config or PlannerConfig.from_env()
    app.config["PLANNER_CONFIG"] = config

    def get_store() -> JSONEventStore:
        return JSONEventStore(config.events_file)

    @app.errorhandler(PlannerError)
    def handle_planner_error(e):
        status = 404 if isinstance(e, EventNotFoundError) else 400
        return jsonify({"status": "error", "message": str(e)}), status

    @app.route("/occurrences", methods=["GET"])
    def occurrences():
        try:
            start, end = _window_args()
        except ValueError as e:
            return jsonify({"status": "error", "message": str(e)}), 400

        templates = get_store().query(start, end) if start <= end else []
        expanded = CalendarQuery(templates, config.max_occurrences).date_range(start, end)
        return jsonify(
            {
                "start": start.isoformat(),
                "end": end.isoformat(),
                "occurrences": occurrences_to_json(expanded),
            }
        )

    @app.route("/days/<day>", methods=["GET"])
    def day_entries(day):
        try:
            target = parse_date(day)
        except ValueError:
            return jsonify({"status": "error", "message": f"Invalid date: {day}"}), 400

        templates = get_store().all()
        entries = CalendarQuery(templates, config.max_occurrences).on_date(target)
        return jsonify(
            {"day": target.isoformat(), "entries": [_entry_to_json(e) for e in entries]}
        )

    @app.route("/calendar.ics", methods=["GET"])
    def calendar_ics():
        """Serve the expanded window as an iCalendar download."""
        try:
            start, end = _window_args()
        except ValueError as e:
            return (str(e), 400)

        templates = get_store().query(start, end) if start <= end else []
        expanded = expand(templates, start, end, config.max_occurrences)
        ical_content = build_calendar(expanded).to_ical()
        return Response(
            ical_content,
            content_type="text/calendar; charset=utf-8",
            headers={"Content-Disposition": "attachment; filename=planner.ics"},
        )

    @app.route("/events/<event_id>/exceptions", methods=["POST"])
    def add_exception(event_id):
        payload = request.get_json(silent=True) or {}
        try:
            day = parse_date(payload.get("date") or "")
        except ValueError:
            return jsonify({"status": "error", "message": "date must be YYYY-MM-DD"}), 400

        template = get_store().add_exception(event_id, day)
        return jsonify(
            {
                "status": "success",
                "id": template.id,
                "excluded_dates": [d.isoformat() for d in template.excluded_dates],
            }
        )

    @app.route("/events/<event_id>/description", methods=["GET"])
    def event_description(event_id):
        template = get_store().get(event_id)
        return jsonify({"id": template.id, "description": describe_recurrence(template)})

    return app
