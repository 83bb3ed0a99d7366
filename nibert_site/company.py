"""Static company profile served by the /company endpoint."""
from __future__ import annotations

import copy
from typing import Any, Dict

COMPANY_INFO: Dict[str, Any] = {
    "name": "Nibert Investments",
    "description": (
        "A full-stack development company specializing in modern web "
        "applications and innovative technology solutions."
    ),
    "established": "2024",
    "location": "Global",
    "services": [
        "Full-Stack Web Development",
        "Mobile Application Development",
        "Cloud Infrastructure Solutions",
        "Database Design & Optimization",
        "API Development & Integration",
        "DevOps & Deployment Services",
    ],
    "technologies": [
        "Vue.js", "React", "Node.js", "Python",
        "PostgreSQL", "MongoDB", "AWS", "Google Cloud",
        "Docker", "Kubernetes", "CI/CD",
    ],
    "contact": {
        "email": "info@nibertinvestments.com",
        "phone": "+1 (555) 123-4567",
        "address": "Remote-First Company",
    },
}


def get_company_info() -> Dict[str, Any]:
    """Return a copy so callers cannot alter the shared profile."""
    return copy.deepcopy(COMPANY_INFO)
