"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Query, Request, status

from water_intake.api.formatting import format_amount, format_timestamp
from water_intake.api.models import AddWaterRequest
from water_intake.app_logging import configure_logging
from water_intake.containers import AppContainer
from water_intake.domain.intake import IntakeBucket, IntakeRecord, TimeRange
from water_intake.services.intake import InvalidAmountError

CHART_TITLE = "Water Consumption"
CHART_LEGEND = "Ounces"
NO_DATA_MESSAGE = "No data available"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/intake", status_code=status.HTTP_201_CREATED)
    async def add_water(
        payload: AddWaterRequest, request: Request
    ) -> dict[str, object]:
        """Log an amount of water."""
        state_container: AppContainer = request.app.state.container
        service = state_container.intake_service
        try:
            record = service.add_water(payload.amount)
        except InvalidAmountError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        total = service.total_consumed()
        logger.info("Total water consumed: %s", format_amount(total))
        return {
            "record": _serialize_record(state_container, record),
            "total": total,
            "total_display": format_amount(total),
        }

    @app.get("/intake/total")
    async def intake_total(request: Request) -> dict[str, object]:
        """Return the running total of logged water."""
        state_container: AppContainer = request.app.state.container
        total = state_container.intake_service.total_consumed()
        return {"total": total, "display": format_amount(total)}

    @app.get("/intake/history")
    async def intake_history(
        request: Request,
        time_range: TimeRange | None = Query(default=None, alias="range"),
    ) -> dict[str, object]:
        """Return logged entries, optionally limited to a range window."""
        state_container: AppContainer = request.app.state.container
        records = state_container.intake_service.history(time_range)
        return {
            "range": time_range,
            "entries": [
                _serialize_record(state_container, record) for record in records
            ],
        }

    @app.get("/intake/trends")
    async def intake_trends(
        request: Request,
        time_range: TimeRange | None = Query(default=None, alias="range"),
    ) -> dict[str, object]:
        """Return the chart payload for the selected range."""
        state_container: AppContainer = request.app.state.container
        selected = time_range or state_container.settings.default_time_range
        service = state_container.intake_service
        buckets = service.buckets(selected)
        has_data = service.has_data()
        return {
            "range": selected,
            "title": CHART_TITLE,
            "legend": CHART_LEGEND,
            "has_data": has_data,
            "message": None if has_data else NO_DATA_MESSAGE,
            "series": [bucket.amount for bucket in buckets],
            "buckets": [_serialize_bucket(bucket) for bucket in buckets],
        }

    return app


def _serialize_record(
    state_container: AppContainer, record: IntakeRecord
) -> dict[str, object]:
    """Serialize a record with its display strings."""
    return {
        "timestamp": record.timestamp.isoformat(),
        "amount": record.amount,
        "amount_display": format_amount(record.amount),
        "timestamp_display": format_timestamp(
            record.timestamp, state_container.intake_service.timezone
        ),
    }


def _serialize_bucket(bucket: IntakeBucket) -> dict[str, object]:
    return {"day": bucket.day.isoformat(), "amount": bucket.amount}
