from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from Services.airtable_service import AirtableError, create_record
from Model.model import DamageReport
from Utils.util import decode_json_body
from Config.settings import Settings
from pydantic import ValidationError
import logging

logger = logging.getLogger("damage_intake.router")

router = APIRouter()

CREATE_DAMAGE_PATH = "/api/create-damage"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


######### End point for creating a damage record in Airtable ########
@router.post(CREATE_DAMAGE_PATH)
async def create_damage(request: Request, settings: Settings = Depends(get_settings)):
    if not settings.airtable_pat:
        logger.error("AIRTABLE_PAT is not configured")
        raise HTTPException(status_code=500, detail="Missing AIRTABLE_PAT")

    try:
        payload = decode_json_body(await request.body())
    except ValueError:
        logger.warning("Rejected damage report: body is not a JSON object")
        raise HTTPException(status_code=400, detail="Invalid JSON body")

    try:
        report = DamageReport.model_validate(payload)
    except ValidationError:
        logger.warning("Rejected damage report: baseId or table missing")
        raise HTTPException(status_code=400, detail="Missing baseId or table")

    logger.info(
        "Damage report for vehicle=%s -> base=%s table=%s",
        report.vehicle,
        report.base_id,
        report.table,
    )

    try:
        record = await run_in_threadpool(
            create_record,
            report.base_id,
            report.table,
            report.to_airtable_fields(),
            settings.airtable_pat,
            settings.airtable_api_url,
            settings.airtable_timeout,
        )
    except AirtableError as e:
        # upstream body is passed through untouched
        raise HTTPException(
            status_code=e.status_code,
            detail={"error": "Airtable error", "detail": e.detail},
        )
    except Exception as e:
        logger.exception("Failed to create damage record")
        raise HTTPException(status_code=500, detail=str(e) or repr(e))

    logger.info("Created Airtable record %s", record.get("id"))
    return record
