"""Parsing of reported figures."""

import re
from typing import Optional

import pandas as pd


def parse_number(value) -> Optional[float]:
    """Parse a reported figure such as '(1,250.5)' or 'SAR 3,000'; None if unusable."""
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if pd.isna(value) else float(value)
    cleaned = str(value).strip()
    if not cleaned:
        return None

    cleaned = cleaned.replace('(', '-').replace(')', '')
    cleaned = cleaned.replace(',', '')
    cleaned = cleaned.replace('—', '-').replace('–', '-').replace('−', '-')
    cleaned = re.sub(r'[₹$€£¥﷼]', '', cleaned)
    cleaned = re.sub(r'^[a-zA-Z\s]+', '', cleaned).strip()
    cleaned = re.sub(r'[a-zA-Z\s]+$', '', cleaned).strip()
    cleaned = re.sub(r'^-\s*[a-zA-Z\s]+', '-', cleaned)
    cleaned = cleaned.replace(' ', '')

    if not cleaned:
        return None
    try:
        return float(cleaned)
    except (ValueError, TypeError):
        return None
