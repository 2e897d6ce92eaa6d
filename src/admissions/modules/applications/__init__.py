"""
Applications Module

The four per-user application sections (profile, family, education,
extracurricular): validated upsert, fetch, and fetch-all.
"""

from admissions.modules.applications.router import router
from admissions.modules.applications.sections import SECTIONS

__all__ = ["router", "SECTIONS"]
