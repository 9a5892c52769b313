from __future__ import annotations

from jalaali_calendar.adapters.jalaali_converter import JalaaliConverter

__all__ = ["JalaaliConverter"]
