import random
import re
import time


def sanitize_upload_name(value: str | None) -> str:
    name = re.split(r"[\\/]", value or "")[-1]
    name = re.sub(r'[:*?"<>|#%\x00]+', "-", name)
    name = re.sub(r"\s+", "_", name).lstrip(".")
    return name or "upload"


def unique_upload_name(original_name: str | None) -> str:
    stamp = int(time.time() * 1000)
    return f"{stamp}-{random.randint(0, 10**9)}-{sanitize_upload_name(original_name)}"


def split_list_text(value: str | None) -> list[str]:
    """Turn newline- or comma-delimited form text into a list of entries.

    Newlines win when present so that entries may themselves contain commas.
    """
    if not value:
        return []
    separator = "\n" if "\n" in value else ","
    return [item.strip() for item in value.split(separator) if item.strip()]
