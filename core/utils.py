# core/utils.py

"""
Repository for program-wide utilities.
"""

import datetime


def today_str() -> str:
    return datetime.date.today().isoformat()


def utc_timestamp() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()
