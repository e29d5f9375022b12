"""
SafeSteps application.

A safety travel screen model (map region, route form, SOS, draggable panel)
and a FastAPI backend stub for user routes.

Author: SafeSteps Team
Date: 2026-10-16
"""
