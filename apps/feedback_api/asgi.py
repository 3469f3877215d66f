from __future__ import annotations

from apps.feedback_api.app import create_app

app = create_app()
