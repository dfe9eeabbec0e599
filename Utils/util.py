import math
import json


##### Turn the raw request body into a dict #####
##### Empty body means empty report, anything that is not a JSON object is rejected #####
def decode_json_body(raw):
    if raw is None:
        return {}
    try:
        text = raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else raw
    except UnicodeDecodeError as e:
        raise ValueError("Invalid JSON body") from e

    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError("Invalid JSON body") from e

    if not isinstance(data, dict):
        raise ValueError("Invalid JSON body")
    return data


##### Trim text values, numbers become text, everything else counts as missing #####
def clean_text(value):
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def clean_number(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and math.isfinite(value):
        return value
    return None
