from urllib.parse import quote
import requests
import logging

# characters encodeURIComponent leaves alone on top of quote()'s defaults
URI_COMPONENT_SAFE = "!*'()"

logger = logging.getLogger("damage_intake.airtable")


class AirtableError(Exception):
    """Airtable answered with a non-2xx status."""

    def __init__(self, status_code, detail):
        super().__init__(f"Airtable returned {status_code}")
        self.status_code = status_code
        self.detail = detail


def record_url(api_url, base_id, table):
    # table names often contain spaces
    return f"{api_url}/{base_id}/{quote(table, safe=URI_COMPONENT_SAFE)}"


def create_record(base_id, table, fields, token, api_url="https://api.airtable.com/v0", timeout=None):
    url = record_url(api_url, base_id, table)
    response = requests.post(
        url,
        headers={
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        },
        json={"fields": fields},
        timeout=timeout,
    )

    if not response.ok:
        logger.warning(
            "Airtable rejected record for base=%s table=%s: status=%s, body=%s",
            base_id,
            table,
            response.status_code,
            response.text,
        )
        raise AirtableError(response.status_code, response.text)

    data = response.json()
    # keys Airtable left out stay out
    return {key: data[key] for key in ("id", "fields") if key in data}
