"""Pytest configuration.

The repository uses a flat `src/` layout without an installed package. This conftest ensures tests
can import from the `src.*` namespace when running `pytest` locally.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def hospital_tables() -> dict[str, list[list[str]]]:
    """A small demo spreadsheet covering every table the handlers read."""

    return {
        "hospital_info!A:B": [
            ["hours", "9am-5pm"],
            ["holidays", "Sundays"],
            ["address", "12 MG Road, Pune"],
            ["parking", "Basement level B1"],
        ],
        "departments!A:E": [
            ["id", "name", "description", "floor", "contact"],
            ["D1", "Cardiology", "Heart care and ECG", "2nd floor, Block A", "ext 201"],
            ["D2", "Pediatrics", "Child health", "1st floor, Block B", "ext 105"],
        ],
        "doctors!A:G": [
            ["id", "name", "department", "days", "hours", "notes"],
            ["1", "Sharma", "Cardiology", "Mon-Wed", "10am-1pm", "Bring previous ECG reports"],
            ["2", "Shankar", "Orthopedics", "Tue-Fri", "2pm-5pm", "Walk-ins accepted"],
            ["3", "Iyer", "Pediatrics", "Mon-Sat", "9am-12pm"],
        ],
        "lab_reports!A:F": [
            ["sample_id", "patient", "test", "date", "status", "note"],
            ["S1234", "P1", "CBC", "2024-05-01", "Ready", "Collect after 4pm"],
            ["S200", "P2", "Lipid", "2024-05-02", "Delivered"],
            ["S300", "P3", "HbA1c", "2024-05-03", "Processing"],
        ],
        "billing!A:C": [
            ["service", "cost", "note"],
            ["Consultation", "INR 500", "Payable at registration desk"],
            ["Lab tests", "INR 300-2000"],
        ],
        "faqs!A:B": [
            ["keyword", "answer"],
            ["insurance", "Yes, we accept most major plans."],
            ["visiting", "Visiting hours are 4pm-7pm."],
        ],
    }
